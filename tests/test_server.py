import io
import os
import signal
from unittest import mock

import pytest

from sigtalk.protocol import encode_bits
from sigtalk.server import Server, main


def _deliver(server, message):
    for bit in encode_bits(message):
        server.handle(signal.SIGUSR2 if bit else signal.SIGUSR1, None)


def test_handle_writes_message_and_newline():
    out = io.BytesIO()
    server = Server(out)
    _deliver(server, b"hello")
    assert out.getvalue() == b"hello\n"


def test_handle_two_messages():
    out = io.BytesIO()
    server = Server(out)
    _deliver(server, b"one")
    _deliver(server, b"two")
    assert out.getvalue() == b"one\ntwo\n"


def test_partial_byte_writes_nothing():
    out = io.BytesIO()
    server = Server(out)
    for _ in range(7):
        server.handle(signal.SIGUSR2, None)
    assert out.getvalue() == b""
    server.handle(signal.SIGUSR2, None)
    assert out.getvalue() == b"\xff"


def test_non_usr2_counts_as_zero():
    out = io.BytesIO()
    server = Server(out)
    for signum in [signal.SIGINT] + [signal.SIGUSR1] * 6 + [signal.SIGUSR2]:
        server.handle(signum, None)
    assert out.getvalue() == b"\x01"


def test_utf8_bytes_pass_through():
    out = io.BytesIO()
    server = Server(out)
    _deliver(server, "héllo")
    assert out.getvalue().decode("utf-8") == "héllo\n"


def test_install_registers_both_signals():
    server = Server(io.BytesIO())
    with mock.patch("sigtalk.server.signal.signal") as register:
        server.install()
    registered = {call.args[0]: call.args[1] for call in register.call_args_list}
    assert set(registered) == {signal.SIGUSR1, signal.SIGUSR2}
    assert all(handler == server.handle for handler in registered.values())


def test_serve_forever_announces_pid():
    out = io.BytesIO()
    server = Server(out)
    with mock.patch("sigtalk.server.signal.signal"), mock.patch(
        "sigtalk.server.signal.pause", side_effect=[None, KeyboardInterrupt]
    ) as pause:
        with pytest.raises(KeyboardInterrupt):
            server.serve_forever()
    assert out.getvalue() == f"Process ID:  {os.getpid()}\n".encode()
    assert pause.call_count == 2


def test_main_stops_on_interrupt(capsysbinary):
    with mock.patch("sigtalk.server.signal.signal"), mock.patch(
        "sigtalk.server.signal.pause", side_effect=KeyboardInterrupt
    ):
        assert main([]) == 0
    assert capsysbinary.readouterr().out == f"Process ID:  {os.getpid()}\n".encode()