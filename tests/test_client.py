import socket

import pytest

from pokerbot.client import Player, connect, main, run
from pokerbot.strategy import Action, GameState

INQUIRE = "inquire/ \n1111 2000 8000 50 blind \ntotal pot: 50 \n/inquire \n"


def _seat(count):
    labels = ["button: ", "small blind: ", "big blind: "]
    lines = []
    for index in range(count):
        label = labels[index] if index < len(labels) else ""
        lines.append(f"{label}{1000 + index} 2000 8000 \n")
    return "seat/ \n" + "".join(lines) + "/seat \n"


def _cards(tag, cards):
    body = "".join(f"{color} {point} \n" for color, point in cards)
    return f"{tag}/ \n{body}/{tag} \n"


def _player(count, hold):
    player = Player(1000)
    player.handle(_seat(count))
    player.handle(_cards("hold", hold))
    return player


def test_registration_message():
    assert Player(7).registration() == b"reg: 7 slf \n\x00"


def test_decided_action_wire_ends_with_nul():
    strong = _player(6, [("SPADES", "A"), ("HEARTS", "A")])
    weak = _player(6, [("SPADES", "7"), ("HEARTS", "2")])
    assert strong.handle(INQUIRE).wire == b"call \n\x00"
    assert weak.handle(INQUIRE).wire == b"fold \n\x00"


def test_seat_message_updates_state():
    player = Player(1001)
    assert player.handle(_seat(6)) is None
    assert player.state.member_count == 6
    assert player.state.money == 2000


def test_full_table_strong_hold_calls():
    player = _player(6, [("SPADES", "A"), ("HEARTS", "A")])
    assert player.handle(INQUIRE) is Action.CALL


def test_full_table_weak_hold_folds():
    player = _player(6, [("SPADES", "7"), ("HEARTS", "2")])
    assert player.handle(INQUIRE) is Action.FOLD


def test_medium_table_uses_looser_rule():
    player = _player(4, [("SPADES", "3"), ("HEARTS", "3")])
    assert player.decide() is Action.CALL
    full = _player(6, [("SPADES", "3"), ("HEARTS", "3")])
    assert full.decide() is Action.FOLD


def test_small_table_always_calls_hold():
    player = _player(3, [("SPADES", "7"), ("HEARTS", "2")])
    assert player.decide() is Action.CALL


def test_flop_without_hand_folds_then_turn_calls():
    player = _player(4, [("SPADES", "2"), ("HEARTS", "5")])
    player.handle(_cards("flop", [("SPADES", "9"), ("HEARTS", "J"), ("CLUBS", "K")]))
    assert player.state.stage == 2
    assert player.decide() is Action.FOLD
    player.handle(_cards("turn", [("DIAMONDS", "4")]))
    assert player.decide() is Action.CALL


def test_pot_win_resets_state():
    player = _player(6, [("SPADES", "A"), ("HEARTS", "A")])
    assert player.handle("pot-win/ \n1000: 300 \n/pot-win \n") is None
    assert player.state == GameState()


def test_run_registers_and_answers():
    ours, theirs = socket.socketpair()
    theirs.sendall(INQUIRE.encode("ascii"))
    theirs.shutdown(socket.SHUT_WR)
    player = Player(7)
    run(ours, player)
    received = b""
    while chunk := theirs.recv(4096):
        received += chunk
    theirs.close()
    assert received == b"reg: 7 slf \n\x00" + b"call \n\x00"
    assert received == player.registration() + player.decide().wire


def test_run_prints_messages(capsys):
    ours, theirs = socket.socketpair()
    theirs.sendall(b"pot-win/ \n/pot-win \n")
    theirs.shutdown(socket.SHUT_WR)
    player = Player(7)
    player.state.stage = 3
    run(ours, player)
    theirs.close()
    assert player.state.stage == 0
    assert "pot-win/" in capsys.readouterr().out


def test_connect_reaches_server():
    server = socket.create_server(("127.0.0.1", 0))
    port = server.getsockname()[1]
    sock = connect("127.0.0.1", port, "127.0.0.1", 0, 0.01)
    conn, _ = server.accept()
    try:
        assert sock.getpeername() == ("127.0.0.1", port)
        assert conn.getpeername() == sock.getsockname()
    finally:
        conn.close()
        sock.close()
        server.close()


def test_connect_bind_failure_raises():
    with pytest.raises(OSError):
        connect("127.0.0.1", 1, "203.0.113.1", 0, 0.01)


def test_main_usage(capsys):
    assert main([]) == -1
    assert "Usage" in capsys.readouterr().out


def test_main_rejects_non_numeric_port(capsys):
    assert main(["127.0.0.1", "port", "127.0.0.1", "0", "7"]) == -1
    assert "Usage" in capsys.readouterr().out