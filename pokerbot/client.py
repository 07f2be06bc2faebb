"""Network client that registers with the game server and plays hands."""

from __future__ import annotations

import socket
import sys
import time

from pokerbot.strategy import Action, GameState

_BUFFER_SIZE = 100 * 1024 - 1
_USAGE = "Usage: {prog} server_ip server_port my_ip my_port my_id"

_HOLD, _FLOP, _TURN, _RIVER = 1, 2, 3, 4
_CARD_STAGES = {"h": _HOLD, "f": _FLOP, "t": _TURN, "r": _RIVER}


class Player:
    """Turns server messages into state updates and replies."""

    def __init__(self, my_id, state=None):
        self.my_id = int(my_id)
        self.state = state if state is not None else GameState()

    def registration(self) -> bytes:
        """The registration message sent right after connecting."""
        return f"reg: {self.my_id} slf \n".encode("ascii") + b"\0"

    def _play(self, hold_rule) -> Action:
        state = self.state
        if state.stage == _HOLD:
            passed = hold_rule() if hold_rule is not None else True
        elif state.stage == _FLOP:
            passed = state.strategy()
        else:
            passed = True
        return Action.CALL if passed else Action.FOLD

    def decide(self) -> Action:
        """Choose between call and fold for the current stage and table size."""
        count = self.state.member_count
        if count >= 6:
            return self._play(self.state.hold_strategy_1)
        if 4 <= count <= 5:
            return self._play(self.state.hold_strategy_2)
        return self._play(None)

    def handle(self, message: str) -> Action | None:
        """Process one server message; return the reply to send, if any."""
        state = self.state
        if message.startswith("se"):
            state.read_seat(message, self.my_id)
        first = message[:1]
        if first in _CARD_STAGES:
            state.read_cards(message)
            state.stage = _CARD_STAGES[first]
        elif first == "i":
            return self.decide()
        elif first == "p":
            state.reset()
        return None


def connect(server_ip, server_port, my_ip, my_port, retry_delay=0.1) -> socket.socket:
    """Bind to the given local address and connect, retrying until the server answers."""
    while True:
        sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        try:
            sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            sock.bind((my_ip, int(my_port)))
        except OSError:
            sock.close()
            raise
        try:
            sock.connect((server_ip, int(server_port)))
        except OSError:
            sock.close()
            time.sleep(retry_delay)
            continue
        return sock


def run(sock, player) -> None:
    """Register, then answer server messages until the connection closes."""
    with sock:
        sock.sendall(player.registration())
        while True:
            data = sock.recv(_BUFFER_SIZE)
            if not data:
                break
            message = data.decode("ascii", errors="replace").partition("\0")[0]
            action = player.handle(message)
            if action is not None:
                sock.sendall(action.wire)
            print(f"Recieve Data From Server({message})")


def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 5:
        print(_USAGE.format(prog=sys.argv[0] if sys.argv else "pokerbot"))
        return -1
    server_ip, server_port, my_ip, my_port, my_id = args
    try:
        ports = int(server_port), int(my_port)
        player_id = int(my_id)
    except ValueError:
        print(_USAGE.format(prog=sys.argv[0] if sys.argv else "pokerbot"))
        return -1
    try:
        sock = connect(server_ip, ports[0], my_ip, ports[1])
    except OSError as exc:
        print(f"bind failed! ({exc})")
        return -1
    run(sock, Player(player_id))
    return 0


if __name__ == "__main__":
    sys.exit(main())