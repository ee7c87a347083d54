import pytest
from wordgame.engine import ConstraintSet, analyze, decode, filter_candidates, update, update_all

WORDS = ["столи", "стуль", "слони", "столб", "колос", "сосна", "кошка", "ложка",
         "карта", "тачка", "книга", "дверь", "ручей", "мышка", "клава", "окошк"]


def test_update_exact_and_absent():
    c = update(ConstraintSet(), "стуль", analyze("стуль", "столи"))  # ++-+-
    assert c.required_letters == {"с", "т", "л"}
    assert c.excluded_letters == {"у", "ь"}
    assert c.fixed_positions == {0: "с", 1: "т", 3: "л"}
    assert c.excluded_at_position == {}


def test_update_present():
    c = update(ConstraintSet(), "слони", analyze("слони", "столи"))  # +^+-+
    assert c.required_letters == {"с", "л", "о", "и"}
    assert c.excluded_letters == {"н"}
    assert c.fixed_positions == {0: "с", 2: "о", 4: "и"}
    assert c.excluded_at_position == {1: {"л"}}


def test_update_duplicate_absent_is_not_excluded():
    # колос vs столб -> -^^-^ : the second 'о' is absent only because the answer has one 'о'
    c = update(ConstraintSet(), "колос", analyze("колос", "столб"))
    assert c.excluded_letters == {"к"}
    assert "о" in c.required_letters
    assert c.excluded_at_position[3] == {"о"}
    assert c.excluded_at_position[1] == {"о"}
    assert "столб" in filter_candidates(["столб"], c)


def test_update_keeps_letters_required_by_earlier_attempts():
    c = ConstraintSet(required_letters=frozenset({"с"}))
    c = update(c, "сахар", decode("-----"))
    assert "с" not in c.excluded_letters
    assert c.excluded_at_position[0] == {"с"}
    assert c.excluded_letters == {"а", "х", "р"}


def test_update_rejects_length_mismatch():
    with pytest.raises(ValueError):
        update(ConstraintSet(), "стул", analyze("стуль", "столи"))


def test_update_is_monotonic():
    secret = "столб"
    before = ConstraintSet()
    for g in ["колос", "сосна", "слони", "стуль", "столи"]:
        after = update(before, g, analyze(g, secret))
        assert before <= after
        assert after.fixed_positions.keys() >= before.fixed_positions.keys()
        before = after
    assert not (before <= ConstraintSet())
    assert ConstraintSet() <= before


def test_update_all_matches_fold():
    attempts = [(g, analyze(g, "кошка")) for g in ["ложка", "мышка", "карта"]]
    c = ConstraintSet()
    for g, v in attempts:
        c = update(c, g, v)
    assert update_all(ConstraintSet(), attempts) == c


def test_filter_candidates_basic():
    c = update(ConstraintSet(), "стуль", analyze("стуль", "столи"))
    words = ["столи", "стуль", "столб", "книга", "ствол"]
    assert filter_candidates(words, c) == ["столи", "столб"]


def test_filter_candidates_each_rule():
    words = ["сосна", "сахар", "кошка", "колос"]
    assert filter_candidates(words, ConstraintSet(required_letters=frozenset("о"))) == \
        ["сосна", "кошка", "колос"]
    assert filter_candidates(words, ConstraintSet(excluded_letters=frozenset("с"))) == ["кошка"]
    assert filter_candidates(words, ConstraintSet(fixed_positions={0: "к"})) == ["кошка", "колос"]
    assert filter_candidates(words, ConstraintSet(excluded_at_position={1: frozenset("о")})) == \
        ["сахар"]


def test_filter_candidates_empty_and_no_mutation():
    words = ["сосна", "сахар"]
    snapshot = list(words)
    assert filter_candidates(words, ConstraintSet(excluded_letters=frozenset("с"))) == []
    assert words == snapshot
    assert filter_candidates([], ConstraintSet()) == []


def test_filter_candidates_unconstrained_returns_everything():
    assert filter_candidates(WORDS, ConstraintSet()) == WORDS


def test_filter_is_idempotent():
    c = update(ConstraintSet(), "ложка", analyze("ложка", "кошка"))
    once = filter_candidates(WORDS, c)
    assert filter_candidates(once, c) == once


def test_secret_always_survives_filter():
    for secret in WORDS:
        for g in WORDS:
            c = update(ConstraintSet(), g, analyze(g, secret))
            assert secret in filter_candidates(WORDS, c), (g, secret)


def test_constraint_set_is_hashable():
    a = update(ConstraintSet(), "стуль", analyze("стуль", "столи"))
    b = update(ConstraintSet(), "стуль", analyze("стуль", "столи"))
    assert a == b and hash(a) == hash(b)
    assert len({a, b, ConstraintSet()}) == 2


def test_constraint_set_mappings_are_read_only():
    c = update(ConstraintSet(), "стуль", analyze("стуль", "столи"))
    with pytest.raises(TypeError):
        c.fixed_positions[0] = "к"
    with pytest.raises(TypeError):
        c.excluded_at_position[2] = frozenset("о")
    assert c.allows("столи")


def test_constraint_set_copies_its_inputs():
    fixed = {0: "с"}
    c = ConstraintSet(fixed_positions=fixed, excluded_at_position={1: {"т"}})
    fixed[0] = "к"
    assert c.fixed_positions[0] == "с"
    assert c.excluded_at_position[1] == frozenset("т")
    assert c.allows("сотка") and not c.allows("стоик")
