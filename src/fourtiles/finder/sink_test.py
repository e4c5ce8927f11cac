import io
import json
import threading

import pytest

from fourtiles.finder.sink import GameSink
from fourtiles.game import Game

GAME = Game(
    tiles=frozenset({"ab", "cd", "ef", "gh"}),
    fourtiles=frozenset({"abcdefgh"}),
    other_words=frozenset({"cdab", "abcd"}),
)


def test_stream_framing():
    stream = io.StringIO()
    sink = GameSink(stream, total=2, indent=None)
    sink.open()
    sink.write(GAME)
    sink.write(GAME)
    sink.close()

    text = stream.getvalue()
    assert text.startswith("[")
    assert text.endswith(",\n]")
    games = json.loads(text.replace(",\n]", "]"))
    assert len(games) == 2
    assert games[0]["fourtiles"] == ["abcdefgh"]
    assert games[0]["otherWords"] == ["abcd", "cdab"]
    assert sorted(games[0]["tiles"]) == ["ab", "cd", "ef", "gh"]
    assert sink.n_written == 2


def test_close_is_idempotent():
    stream = io.StringIO()
    sink = GameSink(stream, total=1)
    sink.open()
    sink.close()
    sink.close()
    assert stream.getvalue() == "[]"


def test_close_without_open():
    stream = io.StringIO()
    sink = GameSink(stream, total=1)
    sink.close()
    assert json.loads(stream.getvalue()) == []


def test_write_requires_open_sink():
    sink = GameSink(io.StringIO(), total=1)
    with pytest.raises(RuntimeError):
        sink.write(GAME)
    sink.open()
    sink.close()
    with pytest.raises(RuntimeError):
        sink.write(GAME)


def test_concurrent_writes_do_not_interleave():
    stream = io.StringIO()
    sink = GameSink(stream, total=80)
    sink.open()

    def write_many():
        for _ in range(10):
            sink.write(GAME)

    threads = [threading.Thread(target=write_many) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    sink.close()

    games = json.loads(stream.getvalue().replace(",\n]", "]"))
    assert len(games) == 80
    assert all(Game.from_dict(game) == GAME for game in games)
