from fullname_parser.config.schema import deep_merge_dicts


def test_deep_merge_nested_and_list_replace() -> None:
    base = {
        "outer": {"a": 1, "b": {"c": 2}},
        "titles": ["mr", "dr"],
    }
    override = {
        "outer": {"b": {"c": 3}},
        "titles": ["sir"],
    }
    merged = deep_merge_dicts(base, override)
    assert merged == {"outer": {"a": 1, "b": {"c": 3}}, "titles": ["sir"]}
    # ensure original not mutated
    assert base["titles"] == ["mr", "dr"]
