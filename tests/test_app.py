from __future__ import annotations

import json
from dataclasses import replace

from toxicityai.app import main, stringify_args


def _json_line(out: str) -> dict:
    return json.loads(out.strip().splitlines()[-1])


def test_stringify_args_joins_with_spaces():
    assert stringify_args(["you", "are", "great"]) == "you are great"
    assert stringify_args([]) == ""


def test_first_run_trains_and_saves(config, capsys):
    assert main(["you", "stupid", "idiot"], config=config) == 0

    out = capsys.readouterr().out
    assert "Create and Train the Model" in out
    assert "Model quality metrics evaluation" in out
    assert f"Model saved to {config.model_path}" in out
    assert config.model_path.is_file()
    assert config.metadata_path.is_file()
    payload = _json_line(out)
    assert isinstance(payload["Prediction"], bool)
    assert 0.0 <= payload["Probability"] <= 1.0


def test_second_run_skips_training(config, capsys):
    main(["thanks"], config=config)
    first = _json_line(capsys.readouterr().out)

    assert main(["thanks"], config=config) == 0

    out = capsys.readouterr().out
    assert "Create and Train the Model" not in out
    assert f"Model appears to exist already: {config.model_path}" in out
    assert "Model loaded from file." in out
    assert _json_line(out) == first


def test_empty_input_still_predicts(config, capsys):
    assert main([], config=config) == 0

    payload = _json_line(capsys.readouterr().out)
    assert set(payload) == {"Prediction", "Probability", "Score"}


def test_missing_training_data_fails_without_json(config, capsys):
    config.train_path.unlink()

    assert main(["hello"], config=config) == 1

    captured = capsys.readouterr()
    assert "Dataset not found" in captured.err
    assert "Prediction" not in captured.out
    assert not config.model_path.exists()


def test_header_only_training_data_fails(config, capsys):
    config.train_path.write_text("Sentiment\tSentimentText\n", encoding="utf-8")

    assert main(["hello"], config=config) == 1

    assert "no rows" in capsys.readouterr().err


def test_corrupt_model_fails(config, capsys):
    config.model_path.write_bytes(b"garbage")

    assert main(["hello"], config=config) == 1

    captured = capsys.readouterr()
    assert "unreadable" in captured.err
    assert "Prediction" not in captured.out


def test_changed_training_data_warns_but_uses_model(config, capsys):
    main(["hello"], config=config)
    capsys.readouterr()
    with config.train_path.open("a", encoding="utf-8") as handle:
        handle.write("1\tyet another stupid comment\n")

    assert main(["hello"], config=config) == 0

    out = capsys.readouterr().out
    assert "changed since the stored model was built" in out
    assert "Create and Train the Model" not in out


def test_evaluate_on_load_and_verbose(config, capsys):
    main(["hello"], config=config)
    capsys.readouterr()

    assert main(["stupid", "idiot"], config=replace(config, evaluate_on_load=True, verbose=True)) == 0

    out = capsys.readouterr().out
    assert "Model quality metrics evaluation" in out
    assert "Sentiment: " in out
    assert "Confidence: " in out
