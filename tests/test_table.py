from rangechart.table import Action, Position, Structure


def test_every_action_has_a_readable_name():
    assert [action.human_readable() for action in Action] == [
        "Limp",
        "RFI",
        "VS Raise",
        "VS 3Bet",
        "VS 4Bet",
        "VS 5Bet",
        "NA",
    ]


def test_labels_round_trip_from_their_codes():
    assert Position("UTG+1") is Position.UTG1
    assert Structure("tournament") is Structure.TOURNAMENT
