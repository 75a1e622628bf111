import re
from pathlib import Path

import pytest

from rulegen.cases import TestCase
from rulegen.config import RuleConfig, TemplateConfig, load_config
from rulegen.errors import InvalidIdentifier, TemplateRenderError
from rulegen.renderer import RuleRenderer, create_rule_renderer, render

FILENAME_IMPORT = "use std::path::PathBuf;"


def _list_items(source: str, name: str) -> list[str]:
    match = re.search(rf"    let {name} = vec!\[\n(.*?)    \];", source, re.DOTALL)
    assert match is not None, f"missing {name} list"
    return [line.strip() for line in match.group(1).splitlines()]


def test_example_rule_renders_expected_pieces() -> None:
    source = render(
        "no-foo",
        has_filename=False,
        pass_cases=['"valid"'],
        fail_cases=['"invalid"'],
    )

    assert "pub struct NoFoo;" in source
    assert "impl Rule for NoFoo {" in source
    assert "Tester::new(NoFoo::NAME, pass, fail).test_and_snapshot();" in source
    assert FILENAME_IMPORT not in source
    assert _list_items(source, "pass") == ['"valid",']
    assert _list_items(source, "fail") == ['"invalid",']


def test_every_placeholder_site_gets_the_same_identifier() -> None:
    source = render("prefer-array-flat-map")

    identifiers = re.findall(r"\b[A-Z][A-Za-z0-9]*ArrayFlatMap\b", source)
    assert identifiers == ["PreferArrayFlatMap"] * 4
    assert "    PreferArrayFlatMap,\n" in source


def test_filename_import_included_exactly_once() -> None:
    source = render("no-foo", has_filename=True)

    assert source.count(FILENAME_IMPORT) == 1
    assert "    use crate::tester::Tester;\n\n    use std::path::PathBuf;\n" in source


def test_filename_import_omitted_by_default() -> None:
    source = render("no-foo")

    assert FILENAME_IMPORT not in source
    assert "    use crate::tester::Tester;\n\n    let pass = vec![" in source


def test_empty_case_lists_render_empty_vectors() -> None:
    source = render("no-foo", pass_cases=[], fail_cases=[])

    assert "    let pass = vec![\n    ];\n" in source
    assert "    let fail = vec![\n    ];\n" in source
    assert _list_items(source, "pass") == []


def test_cases_keep_their_order_and_text() -> None:
    source = render(
        "no-foo",
        pass_cases=["r#\"a\"#", "(r#\"b\"#, None)"],
        fail_cases=[TestCase("c()", filename="c.tsx")],
    )

    assert _list_items(source, "pass") == ['r#"a"#,', '(r#"b"#, None),']
    assert _list_items(source, "fail") == [
        '(r#"c()"#, None, None, Some(PathBuf::from("c.tsx"))),'
    ]


def test_multiline_cases_are_embedded_verbatim() -> None:
    snippet = 'r#"\n    function f() {}\n"#'
    source = render("no-foo", pass_cases=[snippet])

    assert f"        {snippet},\n" in source


def test_rendering_is_deterministic() -> None:
    kwargs = dict(has_filename=True, pass_cases=['"a"'], fail_cases=['"b"'])

    assert render("no-foo", **kwargs) == render("no-foo", **kwargs)


def test_output_ends_with_single_newline() -> None:
    source = render("no-foo")

    assert source.endswith("}\n")
    assert not source.endswith("\n\n")


def test_placeholder_category_keeps_todo_marker() -> None:
    source = render("no-foo")

    assert "    nursery, // TODO: change category to" in source


def test_configured_category_drops_todo_marker() -> None:
    renderer = create_rule_renderer(rule_cfg=RuleConfig(category="suspicious"))
    source = renderer.render("no-foo")

    assert "    suspicious,\n);" in source
    assert "TODO" not in source


@pytest.mark.parametrize("value", ["", "!!!", "9lives"])
def test_invalid_rule_name_raises(value: str) -> None:
    with pytest.raises(InvalidIdentifier):
        render(value)


def test_unknown_placeholder_in_custom_template_fails() -> None:
    renderer = RuleRenderer.from_string("struct {{ pascal_rule_name }}{{ missing }};")

    with pytest.raises(TemplateRenderError):
        renderer.render("no-foo")


def test_broken_template_syntax_fails_to_compile() -> None:
    with pytest.raises(TemplateRenderError):
        RuleRenderer.from_string("{% if %}")


def test_inline_template_wins_over_path(tmp_path: Path) -> None:
    cfg = TemplateConfig(path=str(tmp_path / "missing.j2"), text="{{ snake_rule_name }}")
    renderer = create_rule_renderer(cfg)

    assert renderer.render("noFoo") == "no_foo\n"


def test_template_path_resolves_against_config_dir(tmp_path: Path) -> None:
    (tmp_path / "templates").mkdir()
    (tmp_path / "templates" / "rule.j2").write_text(
        "struct {{ pascal_rule_name }}; // {{ kebab_rule_name }} {{ category }}\n",
        encoding="utf-8",
    )
    config_path = tmp_path / "rulegen.toml"
    config_path.write_text(
        '[template]\npath = "templates/rule.j2"\n\n[rule]\ncategory = "style"\n',
        encoding="utf-8",
    )

    config = load_config(config_path)
    renderer = create_rule_renderer(config.template, config.rule)

    assert renderer.render("noFooBar") == "struct NoFooBar; // no-foo-bar style\n"


def test_missing_template_path_raises(tmp_path: Path) -> None:
    cfg = TemplateConfig(path="nope.j2")

    with pytest.raises(FileNotFoundError):
        create_rule_renderer(cfg, base_dir=tmp_path)


def test_create_rule_renderer_accepts_mappings() -> None:
    renderer = create_rule_renderer(
        {"text": "{{ category }} {{ category_is_placeholder }}"},
        {"category": "perf"},
    )

    assert renderer.category == "perf"
    assert renderer.render("no-foo") == "perf False\n"


def test_create_rule_renderer_rejects_other_config_types() -> None:
    with pytest.raises(TypeError):
        create_rule_renderer(template_cfg="templates/rule.j2")


def test_default_renderer_reports_placeholder_category() -> None:
    renderer = RuleRenderer.from_string("{{ category }} {{ category_is_placeholder }}")

    assert renderer.render("no-foo") == "nursery True\n"
