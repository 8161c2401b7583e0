import io

import pytest

import main
from lineforth import InteractiveForth


@pytest.fixture
def feed_input(monkeypatch):
    """Replace input() with a scripted list of lines; return the prompts seen"""
    prompts = []

    def install(lines):
        remaining = iter(lines)

        def fake_input(prompt):
            prompts.append(prompt)
            try:
                return next(remaining)
            except StopIteration:
                raise EOFError()

        monkeypatch.setattr('builtins.input', fake_input)
        return prompts

    return install


def test_repl_prints_responses(feed_input, capsys):
    feed_input(["3 4 + .", "frob", "bye", "never read"])
    InteractiveForth().repl(banner=False)
    assert capsys.readouterr().out.splitlines() == [" 7  ok", " frob ? "]


def test_repl_prompts_follow_definition_mode(feed_input, capsys):
    prompts = feed_input([": sq", "dup * ;", "4 sq ."])
    InteractiveForth().repl(banner=False)
    assert prompts == ["ok> ", "...> ", "ok> ", "ok> "]
    assert capsys.readouterr().out.splitlines() == ["  ok", " 16  ok"]


def test_repl_stack_command(feed_input, capsys):
    feed_input(["1 2", "STACK"])
    InteractiveForth().repl(banner=False)
    assert capsys.readouterr().out.splitlines() == ["  ok", "1 2 <- Top "]


def test_repl_survives_keyboard_interrupt(monkeypatch, capsys):
    events = iter([": w 1", KeyboardInterrupt, "w"])

    def fake_input(prompt):
        try:
            event = next(events)
        except StopIteration:
            raise EOFError()
        if event is KeyboardInterrupt:
            raise KeyboardInterrupt()
        return event

    monkeypatch.setattr('builtins.input', fake_input)
    forth = InteractiveForth()
    forth.repl(banner=False)
    assert not forth.defining
    assert capsys.readouterr().out.splitlines()[-1] == " w ? "


def test_repl_readline_mode(monkeypatch, capsys):
    monkeypatch.setattr('sys.stdin', io.StringIO("2 3 * .\n"))
    InteractiveForth().repl(readline_mode=True, banner=False)
    assert " 6  ok" in capsys.readouterr().out


def test_run_batch(capsys):
    main.run_batch(InteractiveForth(), [": inc 1 + ;\n", "41 inc .\n"])
    assert capsys.readouterr().out.splitlines() == ["  ok", " 42  ok"]


def test_main_rejects_unknown_argument(capsys):
    assert main.main(['nonsense']) == 2
    assert "Unrecognized argument: nonsense" in capsys.readouterr().out


def test_user_word_named_stack_wins_over_command(feed_input, capsys):
    feed_input([": stack 42 . ;", "stack"])
    InteractiveForth().repl(banner=False)
    assert capsys.readouterr().out.splitlines() == ["  ok", " 42  ok"]
