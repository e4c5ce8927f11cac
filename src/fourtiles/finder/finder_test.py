import builtins
import json
from pathlib import Path

import pytest

from fourtiles import main
from fourtiles.finder import finder
from fourtiles.finder.config import FinderConfig
from fourtiles.finder.task_args import TaskArgs
from fourtiles.test_utils import FOURTILES, LEXICON, OTHER_WORDS


def write_dictionary(tmp_path: Path) -> Path:
    path = tmp_path / "dictionary.txt"
    path.write_text("\n".join(sorted(LEXICON)) + "\n", encoding="utf-8")
    return path


def read_games(path: Path) -> list[dict]:
    return json.loads(path.read_text(encoding="utf-8").replace(",\n]", "]"))


def test_task_args():
    task_args = TaskArgs(dictionary=Path("dictionary.txt"), words=LEXICON, config=FinderConfig())
    assert list(task_args.fourtiles) == sorted(FOURTILES)
    assert task_args.max_games == 1
    summary = task_args.summary()
    assert summary["words_count"] == len(LEXICON)
    assert summary["fourtile_lengths"] == "8-16"
    assert summary["fourtiles_count"] == 5


def test_run(tmp_path):
    dictionary = write_dictionary(tmp_path)
    output = tmp_path / "games.json"
    config = FinderConfig(max_workers=1, seed=3, log_dir=str(tmp_path / "logs"))

    assert finder.run(dictionary, output=output, config=config) == 1

    games = read_games(output)
    assert len(games) == 1
    assert games[0]["fourtiles"] == sorted(FOURTILES)
    logs = list((tmp_path / "logs" / "dictionary").glob("*.log"))
    assert len(logs) == 1
    assert "Games found: 1" in logs[0].read_text(encoding="utf-8")


def test_main(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    dictionary = write_dictionary(tmp_path)
    output = tmp_path / "games.json"
    main(["-d", str(dictionary), "-o", str(output), "--workers", "1", "--seed", "7"])

    games = read_games(output)
    assert len(games) == 1
    assert games[0]["otherWords"] == sorted(OTHER_WORDS)


def test_main_missing_dictionary(tmp_path, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--dictionary", str(tmp_path / "missing.txt")])
    assert excinfo.value.code == 1
    assert "Word list file not found" in capsys.readouterr().err


def test_main_version(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--version"])
    assert excinfo.value.code == 0
    assert "1.0.0" in capsys.readouterr().out


def test_main_requires_dictionary():
    with pytest.raises(SystemExit) as excinfo:
        main([])
    assert excinfo.value.code == 2


def test_run_keeps_output_when_log_cannot_be_opened(tmp_path, monkeypatch):
    dictionary = write_dictionary(tmp_path)
    output = tmp_path / "games.json"
    output.write_text("previous games", encoding="utf-8")

    def open_without_logs(path, *args, **kwargs):
        if str(path).endswith(".log"):
            raise PermissionError(f"Cannot open {path}")
        return builtins.open(path, *args, **kwargs)

    monkeypatch.setattr(finder, "open", open_without_logs, raising=False)
    config = FinderConfig(max_workers=1, log_dir=str(tmp_path / "logs"))
    with pytest.raises(PermissionError):
        finder.run(dictionary, output=output, config=config)
    assert output.read_text(encoding="utf-8") == "previous games"
