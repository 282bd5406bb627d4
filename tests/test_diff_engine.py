from pathlib import Path

from tokenpack.diff import MISSING, TokenChange, diff_token_trees, diff_tokens
from tokenpack.source import read_token_file

EXAMPLES_DIR = Path(__file__).resolve().parents[1] / "examples" / "tokens"


def _signature(changes: list[TokenChange]) -> list[tuple[str, str]]:
    return [(change.path, change.kind) for change in changes]


def test_diff_identical_trees_has_no_changes() -> None:
    tree = read_token_file(EXAMPLES_DIR / "base.json")

    assert diff_tokens(tree, tree) == []
    assert diff_tokens(tree, read_token_file(EXAMPLES_DIR / "base.json")) == []


def test_diff_scenario_reports_most_specific_paths_in_key_order() -> None:
    base = {"color": {"primary": {"$value": "#3b82f6", "$type": "color"}}}
    head = {
        "color": {"primary": {"$value": "#2563eb", "$type": "color"}},
        "spacing": {"sm": {"$value": "0.5rem", "$type": "dimension"}},
    }

    changes = diff_tokens(base, head)

    assert changes == [
        TokenChange.modified(
            "color.primary",
            {"$value": "#3b82f6", "$type": "color"},
            {"$value": "#2563eb", "$type": "color"},
        ),
        TokenChange.added("spacing", {"sm": {"$value": "0.5rem", "$type": "dimension"}}),
    ]


def test_diff_example_files() -> None:
    base = read_token_file(EXAMPLES_DIR / "base.json")
    head = read_token_file(EXAMPLES_DIR / "head.json")

    changes = diff_tokens(base, head)

    assert _signature(changes) == [
        ("color.primary.500", "modified"),
        ("color.neutral", "removed"),
        ("spacing.sm", "modified"),
        ("spacing.lg", "added"),
        ("typography.fontFamily.sans", "modified"),
    ]


def test_leaf_token_changes_are_atomic() -> None:
    base = {"spacing": {"md": {"$value": "1rem", "$type": "dimension"}}}
    head = {"spacing": {"md": {"$value": "1rem", "$type": "dimension", "$description": "x"}}}

    changes = diff_tokens(base, head)

    assert len(changes) == 1
    assert changes[0].path == "spacing.md"
    assert changes[0].kind == "modified"
    assert changes[0].old_value == base["spacing"]["md"]
    assert changes[0].new_value == head["spacing"]["md"]


def test_removed_group_is_reported_once() -> None:
    primary = {
        "50": {"$value": "#eff6ff"},
        "500": {"$value": "#3b82f6"},
        "900": {"$value": "#1e3a8a"},
    }
    base = {"color": {"primary": primary, "accent": {"$value": "#f59e0b"}}}
    head = {"color": {"accent": {"$value": "#f59e0b"}}}

    changes = diff_tokens(base, head)

    assert changes == [TokenChange.removed("color.primary", primary)]


def test_missing_base_defaults_to_empty_tree() -> None:
    head = {"spacing": {"sm": {"$value": "0.5rem"}}, "radius": {"$value": "4px"}}

    for base in (None, {}):
        changes = diff_tokens(base, head)
        assert _signature(changes) == [("spacing", "added"), ("radius", "added")]
        assert changes[0].new_value == {"sm": {"$value": "0.5rem"}}
        assert changes[0].old_value is MISSING


def test_missing_head_defaults_to_empty_tree() -> None:
    base = {"spacing": {"sm": {"$value": "0.5rem"}}}

    assert diff_tokens(base, None) == [
        TokenChange.removed("spacing", {"sm": {"$value": "0.5rem"}})
    ]


def test_node_versus_leaf_mismatch_is_single_modification() -> None:
    group = {"light": {"$value": "#ffffff"}, "dark": {"$value": "#000000"}}
    leaf = {"$value": "#ffffff", "$type": "color"}

    forward = diff_tokens({"color": {"surface": group}}, {"color": {"surface": leaf}})
    backward = diff_tokens({"color": {"surface": leaf}}, {"color": {"surface": group}})

    assert forward == [TokenChange.modified("color.surface", group, leaf)]
    assert backward == [TokenChange.modified("color.surface", leaf, group)]


def test_node_versus_scalar_mismatch_is_single_modification() -> None:
    changes = diff_tokens({"radius": {"sm": {"$value": "2px"}}}, {"radius": "4px"})

    assert changes == [TokenChange.modified("radius", {"sm": {"$value": "2px"}}, "4px")]


def test_falsy_value_is_still_a_leaf() -> None:
    base = {"opacity": {"none": {"$value": 0, "$type": "number"}}}
    head = {"opacity": {"none": {"$value": 0, "$type": "number", "$description": "hidden"}}}

    assert _signature(diff_tokens(base, head)) == [("opacity.none", "modified")]


def test_array_values_are_compared_in_order() -> None:
    base = {"font": {"$value": ["Inter", "system-ui"]}}
    head = {"font": {"$value": ["system-ui", "Inter"]}}

    assert _signature(diff_tokens(base, head)) == [("font", "modified")]
    assert diff_tokens(base, {"font": {"$value": ["Inter", "system-ui"]}}) == []


def test_group_metadata_keys_are_compared_as_members() -> None:
    base = {"color": {"$type": "color", "primary": {"$value": "#fff"}}}
    head = {"color": {"$type": "color", "$description": "Brand", "primary": {"$value": "#fff"}}}

    assert diff_tokens(base, head) == [TokenChange.added("color.$description", "Brand")]


def test_null_values_are_values_not_absence() -> None:
    changes = diff_tokens({"legacy": None}, {})

    assert changes == [TokenChange.removed("legacy", None)]
    assert changes[0].to_dict() == {"path": "legacy", "kind": "removed", "oldValue": None}


def test_kind_symmetry_under_reversal() -> None:
    base = read_token_file(EXAMPLES_DIR / "base.json")
    head = read_token_file(EXAMPLES_DIR / "head.json")

    forward = {change.path: change for change in diff_tokens(base, head)}
    backward = {change.path: change for change in diff_tokens(head, base)}

    assert forward.keys() == backward.keys()
    swapped = {"added": "removed", "removed": "added", "modified": "modified"}
    for path, change in forward.items():
        reverse = backward[path]
        assert reverse.kind == swapped[change.kind]
        assert reverse.old_value == change.new_value
        assert reverse.new_value == change.old_value


def test_diff_is_deterministic_and_does_not_mutate_inputs() -> None:
    base = read_token_file(EXAMPLES_DIR / "base.json")
    head = read_token_file(EXAMPLES_DIR / "head.json")
    base_copy = read_token_file(EXAMPLES_DIR / "base.json")

    first = diff_tokens(base, head)
    second = diff_tokens(base, head)

    assert first == second
    assert base == base_copy


def test_diff_token_trees_summary() -> None:
    base = read_token_file(EXAMPLES_DIR / "base.json")
    head = read_token_file(EXAMPLES_DIR / "head.json")

    result = diff_token_trees(base, head, base_label="main", head_label="HEAD")

    assert result.identical is False
    assert result.summary() == {"added": 1, "removed": 1, "modified": 3, "total": 5}
    assert [change.path for change in result.added] == ["spacing.lg"]
    assert [change.path for change in result.removed] == ["color.neutral"]

    payload = result.to_dict()
    assert payload["base"] == "main"
    assert payload["head"] == "HEAD"
    assert payload["changes"][0] == {
        "path": "color.primary.500",
        "kind": "modified",
        "oldValue": {"$value": "#3b82f6", "$type": "color"},
        "newValue": {"$value": "#2563eb", "$type": "color"},
    }
    assert "oldValue" not in payload["changes"][3]


def test_nan_values_do_not_break_identity() -> None:
    tree = {"opacity": {"x": {"$value": float("nan")}}}
    same = {"opacity": {"x": {"$value": float("nan")}}}

    assert diff_tokens(tree, same) == []


def test_deeply_nested_trees_do_not_exhaust_recursion() -> None:
    base: dict = {"$value": "a"}
    head: dict = {"$value": "b"}
    for _ in range(5000):
        base = {"g": base}
        head = {"g": head}

    changes = diff_tokens(base, head)

    assert len(changes) == 1
    assert changes[0].kind == "modified"
    assert changes[0].path == ".".join(["g"] * 5000)
    assert diff_tokens(base, base) == []


def test_nested_changes_keep_depth_first_order() -> None:
    base = {"a": {"x": {"$value": 1}, "y": {"$value": 2}}, "b": {"$value": 3}}
    head = {"a": {"x": {"$value": 9}, "y": {"$value": 8}}, "b": {"$value": 7}}

    assert _signature(diff_tokens(base, head)) == [
        ("a.x", "modified"),
        ("a.y", "modified"),
        ("b", "modified"),
    ]
