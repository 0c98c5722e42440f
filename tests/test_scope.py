import pytest

from minicomp.scope import Scope


def make_scope():
    scope = Scope()
    scope.open()
    return scope


def test_put_and_get_from_current():
    scope = make_scope()
    scope.put("x", 1)
    assert scope.get_from_current("x") == 1
    assert scope.get_from_current("y") is None


def test_inner_scope_shadows_outer():
    scope = make_scope()
    scope.put("x", "outer")
    scope.open()
    scope.put("x", "inner")
    assert scope.get_from_all("x") == "inner"
    scope.close()
    assert scope.get_from_all("x") == "outer"


def test_get_from_all_searches_outer_levels():
    scope = make_scope()
    scope.put("a", 10)
    scope.open()
    assert scope.get_from_current("a") is None
    assert scope.get_from_all("a") == 10
    assert scope.get_from_all("missing") is None


def test_len_counts_open_scopes():
    scope = Scope()
    assert len(scope) == 0
    scope.open()
    scope.open()
    assert len(scope) == 2
    scope.close()
    assert len(scope) == 1


def test_put_overwrites_in_current():
    scope = make_scope()
    scope.put("k", 1)
    scope.put("k", 2)
    assert scope.get_from_current("k") == 2
    assert len(scope.current()) == 1


def test_current_is_read_only():
    scope = make_scope()
    scope.put("k", 1)
    view = scope.current()
    with pytest.raises(TypeError):
        view["k"] = 2
    assert dict(view) == {"k": 1}


def test_levels_innermost_first():
    scope = make_scope()
    scope.put("a", 1)
    scope.open()
    scope.put("b", 2)
    assert [dict(level) for level in scope.levels()] == [{"b": 2}, {"a": 1}]


@pytest.mark.parametrize("action", ["close", "current"])
def test_empty_scope_raises(action):
    scope = Scope()
    with pytest.raises(IndexError):
        getattr(scope, action)()
    assert len(scope) == 0
    assert scope.render() == "____________________________\n\n"


def test_empty_scope_lookups_raise():
    scope = Scope()
    with pytest.raises(IndexError):
        scope.put("x", 1)
    with pytest.raises(IndexError):
        scope.get_from_current("x")
    with pytest.raises(IndexError):
        scope.get_from_all("x")
    assert len(scope) == 0


def test_render_layout():
    scope = make_scope()
    scope.put("b", 2)
    scope.put("a", 1)
    scope.open()
    scope.put("c", 3)
    expected = (
        "____________________________\n"
        "c=3\n"
        "----------------------------\n"
        ">>a=1\n"
        ">>b=2\n"
        "\n"
    )
    assert scope.render() == expected
    assert str(scope) == expected


def test_render_filter_hides_prefixed_keys():
    scope = make_scope()
    scope.put("_hidden", 1)
    scope.put("shown", 2)
    scope.set_filter("_")
    text = scope.render()
    assert "_hidden" not in text
    assert "shown=2\n" in text


def test_render_without_scopes():
    assert Scope().render() == "____________________________\n\n"