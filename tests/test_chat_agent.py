import builtins

import chat_agent


def _feed(monkeypatch, answers):
    it = iter(answers)
    monkeypatch.setattr(builtins, "input", lambda _prompt="": next(it))


def test_resolve_answer_maps_quick_replies():
    assert chat_agent.resolve_answer("3") == "Mediterranean & dry"
    assert chat_agent.resolve_answer("99") == "99"
    assert chat_agent.resolve_answer("full sun") == "full sun"


def test_chat_prints_summary_after_end_phrase(monkeypatch, capsys):
    _feed(monkeypatch, ["11", "mostly shade, that's all", ""])
    chat_agent.chat()
    out = capsys.readouterr().out
    assert "Q-plants:" in out
    assert "GARDEN CONCEPT" in out
    assert "Sun: shade" in out
    assert "Avoid: Roses" in out


def test_chat_restart_clears_history(monkeypatch, capsys):
    _feed(monkeypatch, ["I love ferns", "restart", "exit"])
    chat_agent.chat()
    out = capsys.readouterr().out
    assert "Starting over." in out
    # After the restart the questionnaire begins again with plants
    assert out.count("Q-plants:") == 2


def test_main_handles_interrupt(monkeypatch, capsys):
    def _interrupt(_prompt=""):
        raise KeyboardInterrupt

    monkeypatch.setattr(builtins, "input", _interrupt)
    chat_agent.main()
    assert "interrupted" in capsys.readouterr().out
