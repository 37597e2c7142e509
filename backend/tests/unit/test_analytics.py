"""Unit Tests: Roster overview and batch summaries."""

from typerank.scoring.analytics import summarize_batch, summarize_roster


def test_empty_roster_overview() -> None:
    overview = summarize_roster([], total_batches=0)
    assert overview.total_participants == 0
    assert overview.average_score == 0.0
    assert overview.top_score == 0.0


def test_roster_overview(make_participant) -> None:
    roster = [
        make_participant("A", 60, 95, 3),  # 57.0
        make_participant("B", 55, 98, 1),  # 53.9
    ]

    overview = summarize_roster(roster, total_batches=2)

    assert overview.total_participants == 2
    assert overview.total_batches == 2
    assert overview.average_score == 55.45
    assert overview.top_score == 57.0


def test_batch_summary(make_participant) -> None:
    roster = [
        make_participant("M1", 40, 90, 5, batch="Morning"),
        make_participant("M2", 60, 100, 0, batch="Morning"),
        make_participant("E1", 99, 99, 0, batch="Evening"),
    ]

    summary = summarize_batch(roster, "Morning")

    assert summary.participants == 2
    assert summary.average_wpm == 50.0
    assert summary.average_accuracy == 95.0
    assert summary.average_score == 48.0
    assert summary.top_performer.name == "M2"
    assert summary.top_performer.rank == 1


def test_empty_batch_summary(make_participant) -> None:
    summary = summarize_batch([make_participant("A", 60, 95, 3)], "Weekend")
    assert summary.participants == 0
    assert summary.top_performer is None
