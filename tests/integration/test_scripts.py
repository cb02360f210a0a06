"""
Integration tests for the command line scripts.

Scripts live outside the package, so each test loads its module by path and
drives the Typer app with CliRunner.
"""

import importlib.util
from pathlib import Path

import pytest
from typer.testing import CliRunner

from folio.contexts.cv import export_to_markdown

SCRIPTS_PATH = Path(__file__).parents[2] / "scripts"

runner = CliRunner()


def load_script(name: str, monkeypatch, logs_path: Path):
    """Import scripts/<name>.py with its log directory redirected."""
    spec = importlib.util.spec_from_file_location(f"script_{name}", SCRIPTS_PATH / f"{name}.py")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    if hasattr(module, "LOGS_PATH"):
        monkeypatch.setattr(module, "LOGS_PATH", logs_path)
    return module


@pytest.mark.integration
def test_export_markdown(monkeypatch, tmp_path, cv_path):
    module = load_script("export_markdown", monkeypatch, tmp_path / "logs")

    result = runner.invoke(module.app, ["--cv", str(cv_path), "--audience", "fintech"])

    assert result.exit_code == 0
    assert result.stdout.startswith("# Ada Example\n")
    assert "### Software Engineer at Initech Payments" in result.stdout
    assert "Hooli" not in result.stdout


@pytest.mark.integration
def test_export_markdown_writes_text_unchanged(monkeypatch, tmp_path, cv_path, cv):
    """Test that stdout carries the export exactly, with no newline appended."""
    module = load_script("export_markdown", monkeypatch, tmp_path / "logs")

    result = runner.invoke(module.app, ["--cv", str(cv_path)])

    assert result.exit_code == 0
    assert result.stdout == export_to_markdown(cv)


@pytest.mark.integration
def test_export_markdown_missing_cv(monkeypatch, tmp_path):
    module = load_script("export_markdown", monkeypatch, tmp_path / "logs")

    result = runner.invoke(module.app, ["--cv", str(tmp_path / "missing.json")])

    assert result.exit_code == 1


@pytest.mark.integration
def test_export_linkedin_section(monkeypatch, tmp_path, cv_path):
    module = load_script("export_linkedin", monkeypatch, tmp_path / "logs")

    result = runner.invoke(
        module.app, ["HEADLINE", "--cv", str(cv_path), "--config", str(tmp_path / "none.yaml")]
    )

    assert result.exit_code == 0
    assert "HEADLINE (220 chars max)" in result.stdout
    assert "SKILLS FOR LINKEDIN" not in result.stdout


@pytest.mark.integration
def test_export_linkedin_unknown_section(monkeypatch, tmp_path, cv_path):
    module = load_script("export_linkedin", monkeypatch, tmp_path / "logs")

    result = runner.invoke(module.app, ["volunteering", "--cv", str(cv_path)])

    # Usage error
    assert result.exit_code == 2


@pytest.mark.integration
def test_build_site_script(monkeypatch, tmp_path, cv_path, blog_dir):
    module = load_script("build_site", monkeypatch, tmp_path / "logs")
    dist = tmp_path / "dist"

    result = runner.invoke(
        module.app, ["--dist", str(dist), "--cv", str(cv_path), "--content", str(blog_dir)]
    )

    assert result.exit_code == 0
    assert (dist / "cv" / "index.html").exists()
    assert (dist / "rss.xml").exists()


@pytest.mark.integration
def test_build_site_drafts_stay_out_of_feed(monkeypatch, tmp_path, cv_path, blog_dir):
    module = load_script("build_site", monkeypatch, tmp_path / "logs")
    dist = tmp_path / "dist"

    result = runner.invoke(
        module.app,
        ["--dist", str(dist), "--cv", str(cv_path), "--content", str(blog_dir), "--drafts"],
    )

    assert result.exit_code == 0
    assert (dist / "blog" / "work-in-progress" / "index.html").exists()
    rss = (dist / "rss.xml").read_text(encoding="utf-8")
    assert "work-in-progress" not in rss
    assert "/blog/hello-world/" in rss


@pytest.mark.integration
def test_validate_content_passes(monkeypatch, tmp_path, cv_path, blog_dir):
    module = load_script("validate_content", monkeypatch, tmp_path / "logs")

    result = runner.invoke(module.app, ["--cv", str(cv_path), "--content", str(blog_dir)])

    assert result.exit_code == 0
    assert "hello-world.md" in result.stdout


@pytest.mark.integration
def test_validate_content_lists_failures(monkeypatch, tmp_path, cv_path, blog_dir):
    (blog_dir / "broken.md").write_text("---\ntitle: Broken\npublishedAt: someday\n---\n", encoding="utf-8")
    module = load_script("validate_content", monkeypatch, tmp_path / "logs")

    result = runner.invoke(module.app, ["--cv", str(cv_path), "--content", str(blog_dir)])

    assert result.exit_code == 1
    assert "description: required field is missing" in result.stdout
    assert "publishedAt: expected a date, got 'someday'" in result.stdout


@pytest.mark.integration
def test_publish_devto_requires_key(monkeypatch, tmp_path, blog_dir):
    module = load_script("publish_devto", monkeypatch, tmp_path / "logs")
    monkeypatch.delenv("DEVTO_API_KEY", raising=False)

    result = runner.invoke(module.app, ["hello-world", "--content", str(blog_dir)])

    assert result.exit_code == 1
    assert not (tmp_path / "logs").exists()


@pytest.mark.integration
def test_generate_pdf_tailored_missing_source(monkeypatch, tmp_path):
    module = load_script("generate_pdf", monkeypatch, tmp_path / "logs")

    result = runner.invoke(module.app, ["tailored", str(tmp_path / "missing.md")])

    assert result.exit_code == 1


@pytest.mark.integration
def test_generate_pdf_missing_chrome_path(monkeypatch, tmp_path):
    source = tmp_path / "cv.md"
    source.write_text("# Ada Example\n", encoding="utf-8")
    monkeypatch.setenv("CHROME_PATH", str(tmp_path / "no-chrome"))
    module = load_script("generate_pdf", monkeypatch, tmp_path / "logs")

    result = runner.invoke(module.app, ["tailored", str(source)])

    assert result.exit_code == 1
    assert result.exception is None or isinstance(result.exception, SystemExit)
    assert "no-chrome" in result.output
