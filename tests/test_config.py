from pathlib import Path

import pytest

from rulegen.config import (
    AppConfig,
    OutputConfig,
    RuleConfig,
    coerce_config,
    load_config,
)
from rulegen.errors import UnknownRuleKind
from rulegen.kinds import RuleKind
from rulegen.naming import RuleName


def test_defaults_keep_placeholder_category() -> None:
    config = AppConfig()

    assert config.rule.kind == "eslint"
    assert config.rule.category == "nursery"
    assert config.rule.category_is_placeholder
    assert not config.output.overwrite


def test_load_config_reads_sections(tmp_path: Path) -> None:
    path = tmp_path / "rulegen.toml"
    path.write_text(
        "[rule]\n"
        'kind = "jsx_a11y"\n'
        'category = "correctness"\n'
        "\n"
        "[output]\n"
        'rules_dir = "rules"\n'
        "overwrite = true\n",
        encoding="utf-8",
    )

    config = load_config(path)

    assert config.rule.kind == "jsx-a11y"
    assert not config.rule.category_is_placeholder
    assert config.output == OutputConfig(rules_dir="rules", overwrite=True)
    assert config.template.get_config_root() == tmp_path


def test_load_config_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "missing.toml")


def test_load_config_rejects_non_table_section(tmp_path: Path) -> None:
    path = tmp_path / "rulegen.toml"
    path.write_text('rule = "eslint"\n', encoding="utf-8")

    with pytest.raises(TypeError):
        load_config(path)


def test_load_config_rejects_unknown_kind(tmp_path: Path) -> None:
    path = tmp_path / "rulegen.toml"
    path.write_text('[rule]\nkind = "reakt"\n', encoding="utf-8")

    with pytest.raises(UnknownRuleKind):
        load_config(path)


def test_blank_category_is_rejected() -> None:
    with pytest.raises(ValueError):
        RuleConfig(category="  ")


def test_resolve_rule_path(tmp_path: Path) -> None:
    output = OutputConfig(rules_dir="crates/linter/src/rules")
    path = output.resolve_rule_path(RuleKind.REACT_PERF, RuleName.parse("jsx-no-new-object"), tmp_path)

    assert path == tmp_path / "crates/linter/src/rules/react_perf/jsx_no_new_object.rs"


def test_resolve_rule_path_absolute_rules_dir(tmp_path: Path) -> None:
    output = OutputConfig(rules_dir=str(tmp_path / "rules"))
    path = output.resolve_rule_path("eslint", RuleName.parse("no-foo"), Path("/elsewhere"))

    assert path == tmp_path / "rules" / "eslint" / "no_foo.rs"


def test_coerce_config_accepts_mappings() -> None:
    assert coerce_config({"category": "perf"}, RuleConfig, "rule").category == "perf"
    assert coerce_config(None, RuleConfig, "rule") == RuleConfig()
    with pytest.raises(TypeError):
        coerce_config(3, RuleConfig, "rule")
