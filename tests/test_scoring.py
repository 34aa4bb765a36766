from recommendations_api.app.services import scoring


def test_votes_move_score_by_one():
    assert scoring.UPVOTE == 1
    assert scoring.DOWNVOTE == -1


def test_threshold_is_strict():
    assert not scoring.is_eliminated(0)
    assert not scoring.is_eliminated(-5)
    assert scoring.is_eliminated(-6)
    assert scoring.is_eliminated(-100)


def test_high_scores_are_never_eliminated():
    assert not scoring.is_eliminated(11)
