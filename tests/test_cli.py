from __future__ import annotations

import pytest
import typer
from typer.testing import CliRunner

from conftest import tree, write
from fo_app.cli import app
from fo_app.commands.common import parse_categories, resolve_dry_run

runner = CliRunner()


def test_apply_copies_into_default_categories(inbox):
    result = runner.invoke(app, ["organize", str(inbox), "--apply", "--sequential"])

    assert result.exit_code == 0, result.output
    assert "[APPLY] method=extension copied=2 failed=0" in result.output
    assert (inbox / "Documents" / "a.pdf").exists()
    assert (inbox / "Images" / "b.png").exists()


def test_plan_then_decline_leaves_folder_untouched(inbox):
    before = tree(inbox)

    result = runner.invoke(app, ["organize", str(inbox), "--plan"], input="n\n")

    assert result.exit_code == 0, result.output
    assert "[PLAN] method=extension copies=2 skipped=1" in result.output
    assert tree(inbox) == before


def test_plan_then_accept_applies(inbox):
    result = runner.invoke(app, ["organize", str(inbox), "--plan"], input="y\n")

    assert result.exit_code == 0, result.output
    assert "[APPLY]" in result.output
    assert (inbox / "Documents" / "a.pdf").exists()


def test_custom_categories(tmp_path):
    write(tmp_path / "a.pdf")
    write(tmp_path / "b.png")

    result = runner.invoke(
        app,
        ["organize", str(tmp_path), "-c", "Papers=.pdf", "-c", "Pics=png", "--apply"],
    )

    assert result.exit_code == 0, result.output
    assert (tmp_path / "Papers" / "a.pdf").exists()
    assert (tmp_path / "Pics" / "b.png").exists()
    assert not (tmp_path / "Documents").exists()


def test_method_option(tmp_path):
    write(tmp_path / "zeta.txt")

    result = runner.invoke(
        app, ["organize", str(tmp_path), "--method", "alphabetical", "--apply"]
    )

    assert result.exit_code == 0, result.output
    assert (tmp_path / "Z" / "zeta.txt").exists()


def test_prompts_for_missing_inputs(inbox):
    result = runner.invoke(
        app, ["organize"], input=f"{inbox}\nsize\napply\n"
    )

    assert result.exit_code == 0, result.output
    assert (inbox / "Small" / "c.xyz").exists()


def test_plan_and_apply_together_is_an_error(inbox):
    result = runner.invoke(app, ["organize", str(inbox), "--plan", "--apply"])

    assert result.exit_code != 0
    assert not (inbox / "Documents").exists()


def test_categories_require_extension_method(inbox):
    result = runner.invoke(
        app, ["organize", str(inbox), "-m", "size", "-c", "A=a", "--apply"]
    )

    assert result.exit_code != 0


def test_version_command():
    result = runner.invoke(app, ["version"])

    assert result.exit_code == 0
    assert result.output.strip()


def test_parse_categories_keeps_order_and_merges_repeats():
    table = parse_categories(["Docs=pdf, txt", "Pics=png", "Docs=md"])

    assert table == {"Docs": ["pdf", "txt", "md"], "Pics": ["png"]}
    assert list(table) == ["Docs", "Pics"]


@pytest.mark.parametrize("raw", ["Docs", "=pdf", "Docs=", "Docs= , "])
def test_parse_categories_rejects_malformed(raw):
    with pytest.raises(typer.BadParameter):
        parse_categories([raw])


def test_resolve_dry_run():
    assert resolve_dry_run(apply=False, plan=False) is True
    assert resolve_dry_run(apply=True, plan=False) is False
    assert resolve_dry_run(apply=False, plan=True) is True
    with pytest.raises(typer.BadParameter):
        resolve_dry_run(apply=True, plan=True)


def test_categories_imply_extension_method_without_prompting(tmp_path):
    write(tmp_path / "a.pdf")

    # only the plan/apply choice is asked for
    result = runner.invoke(
        app, ["organize", str(tmp_path), "-c", "Papers=pdf"], input="apply\n"
    )

    assert result.exit_code == 0, result.output
    assert "method (" not in result.output
    assert (tmp_path / "Papers" / "a.pdf").exists()


def test_plan_flag_alone_uses_extension_method(inbox):
    result = runner.invoke(app, ["organize", str(inbox), "--plan"], input="n\n")

    assert result.exit_code == 0, result.output
    assert "method (" not in result.output
    assert "[PLAN] method=extension" in result.output


def test_missing_root_argument_is_rejected(tmp_path):
    missing = tmp_path / "nowhere"

    result = runner.invoke(app, ["organize", str(missing), "--apply"])

    assert result.exit_code != 0
    assert "Nothing to organize" not in result.output
    assert not missing.exists()
