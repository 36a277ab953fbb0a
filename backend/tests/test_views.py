import json

from mindmatch.game import machine, views


def _to_reveal(room):
    machine.start_round(room)
    machine.submit_answer(room, "p1", "Parijs", {"p2": "kat hond"})
    machine.submit_answer(room, "p2", "hond en kat", {"p1": "ik wil naar parijs"})


def test_player_state_never_contains_text(make_room):
    room = make_room("Ann", "Bob")
    _to_reveal(room)

    state = views.player_state(room)
    assert state["phase"] == "REVEAL"
    assert state["roomCode"] == "TEST"
    assert state["maxPlayers"] == 6
    assert state["submissionsCount"] == 2
    assert state["revealOrder"] == ["p1", "p2"]
    assert state["revealIndex"] == 0
    assert "prompt" not in state
    assert "revealData" not in state
    assert "submittedIds" not in state

    dumped = json.dumps(state, ensure_ascii=False).lower()
    for secret in ("parijs", "hond", "sid-p1", room.game.prompt.lower()):
        assert secret not in dumped

    assert state["players"][0] == {
        "id": "p1",
        "name": "Ann",
        "ready": True,
        "connected": True,
        "score": 1,
    }


def test_host_state_reveals_current_target(make_room):
    room = make_room("Ann", "Bob")
    _to_reveal(room)

    state = views.host_state(room)
    assert state["prompt"] == room.game.prompt
    assert state["submittedIds"] == ["p1", "p2"]
    assert state["revealData"] == {
        "targetId": "p1",
        "targetName": "Ann",
        "targetAnswer": "Parijs",
        "predictors": [
            {
                "predictorId": "p2",
                "predictorName": "Bob",
                "predicted": "ik wil naar parijs",
                "match": True,
            }
        ],
    }

    machine.advance_reveal(room)
    reveal = views.host_state(room)["revealData"]
    assert reveal["targetId"] == "p2"
    assert reveal["targetAnswer"] == "hond en kat"
    assert reveal["predictors"][0]["match"] is True


def test_host_state_has_no_reveal_outside_reveal_phase(make_room):
    room = make_room("Ann", "Bob")
    machine.start_round(room)
    machine.submit_answer(room, "p1", "geheim", {"p2": "ook geheim"})

    state = views.host_state(room)
    assert state["phase"] == "ANSWERING"
    assert state["revealData"] is None
    assert state["submittedIds"] == ["p1"]
    assert "geheim" not in json.dumps(state)

    machine.submit_answer(room, "p2", "x", {})
    machine.advance_reveal(room)
    machine.advance_reveal(room)
    assert room.game.phase == "SCOREBOARD"
    assert views.host_state(room)["revealData"] is None
