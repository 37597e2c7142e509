"""
Unit Tests: Ranker

Test cases:
- Precedence chain ordering
- Dense 1..N ranks, including full ties
- Stable order for full ties
- Batch scoping
- Input is never mutated
"""

from typerank.scoring import compare_participants, rank_participants, top_n


def test_empty_input_gives_empty_output() -> None:
    assert rank_participants([]) == []


def test_orders_by_score_then_accuracy_then_errors(make_participant) -> None:
    slow = make_participant("Slow", 40, 90, 1)  # 36.0
    precise = make_participant("Precise", 45, 100, 4)  # 45.0
    fast_clean = make_participant("FastClean", 50, 90, 2)  # 45.0
    fast_sloppy = make_participant("FastSloppy", 50, 90, 5)  # 45.0
    best = make_participant("Best", 70, 95, 9)  # 66.5

    ranked = rank_participants([slow, fast_sloppy, precise, best, fast_clean])

    assert [p.name for p in ranked] == [
        "Best",
        "Precise",
        "FastClean",
        "FastSloppy",
        "Slow",
    ]
    for ahead, behind in zip(ranked, ranked[1:]):
        assert ahead.final_score > behind.final_score or (
            ahead.final_score == behind.final_score
            and (
                ahead.accuracy > behind.accuracy
                or (ahead.accuracy == behind.accuracy and ahead.errors <= behind.errors)
            )
        )


def test_ranks_are_dense_even_for_ties(make_participant) -> None:
    first = make_participant("First", 50, 90, 3)
    second = make_participant("Second", 50, 90, 3)
    third = make_participant("Third", 50, 90, 3)

    ranked = rank_participants([first, second, third])

    assert [p.rank for p in ranked] == [1, 2, 3]
    # Full ties keep input order
    assert [p.name for p in ranked] == ["First", "Second", "Third"]


def test_does_not_mutate_input(make_participant) -> None:
    a = make_participant("A", 30, 90, 1)
    b = make_participant("B", 60, 90, 1)
    roster = [a, b]

    ranked = rank_participants(roster)

    assert roster == [a, b]
    assert a.rank is None and b.rank is None
    assert [p.rank for p in ranked] == [1, 2]
    assert ranked[0].id == b.id


def test_batch_filter_ranks_within_batch(make_participant) -> None:
    roster = [
        make_participant("M1", 60, 95, 2, batch="Morning"),
        make_participant("E1", 80, 99, 0, batch="Evening"),
        make_participant("M2", 40, 90, 5, batch="Morning"),
        make_participant("E2", 20, 80, 7, batch="Evening"),
    ]

    morning = rank_participants(roster, batch="Morning")

    assert [p.name for p in morning] == ["M1", "M2"]
    assert [p.rank for p in morning] == [1, 2]
    assert all(p.batch == "Morning" for p in morning)

    assert rank_participants(roster, batch="Weekend") == []


def test_repeated_ranking_is_deterministic(make_participant) -> None:
    roster = [make_participant(f"P{i}", 40 + i % 3, 90, i % 2) for i in range(8)]
    assert rank_participants(roster) == rank_participants(roster)


def test_top_n(make_participant) -> None:
    roster = [make_participant(f"P{i}", 30 + i, 90, 0) for i in range(5)]

    podium = top_n(roster, 3)

    assert [p.name for p in podium] == ["P4", "P3", "P2"]
    assert top_n(roster, 0) == []


def test_ranker_and_comparator_agree(make_participant) -> None:
    pairs = [
        (make_participant("A", 60, 95, 3), make_participant("B", 55, 98, 1)),
        (make_participant("C", 50, 90, 2), make_participant("D", 50, 90, 5)),
        (make_participant("E", 45, 100, 4), make_participant("F", 50, 90, 0)),
        (make_participant("G", 30, 80, 1), make_participant("H", 31, 80, 1)),
    ]
    for a, b in pairs:
        first = rank_participants([a, b])[0]
        result = compare_participants(a, b)
        assert result.winner is not None
        assert result.winner.id == first.id
