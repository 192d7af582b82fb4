import builtins

from eulerkit.cli import INVALID_INPUT, MENU_PROMPT, NUMBER_PROMPT, main, run_problem
from eulerkit.multiples import report, sum_multiples_of_3_and_5


class Script:
    def __init__(self, answers):
        self.answers = list(answers)
        self.prompts = []

    def __call__(self, prompt=""):
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)


def test_run_problem_valid_number():
    read = Script(["10"])
    out = []
    result = run_problem("1", read, out.append)
    assert result == sum_multiples_of_3_and_5(10)
    assert out == [report(10) + "\n"]
    assert read.prompts == [NUMBER_PROMPT]


def test_run_problem_retries_after_invalid_input():
    read = Script(["abc", "-5", "20"])
    out = []
    run_problem("1", read, out.append)
    assert out == [INVALID_INPUT, INVALID_INPUT, report(20) + "\n"]
    assert len(read.prompts) == 3


def test_run_problem_empty_answer_means_zero():
    out = []
    result = run_problem("1", Script([""]), out.append)
    assert result == 0
    assert out == [report(0) + "\n"]


def test_run_problem_unknown_choice_does_nothing():
    read = Script(["10"])
    out = []
    assert run_problem("2", read, out.append) is None
    assert out == []
    assert read.prompts == []


def test_main_loops_until_valid_choice(monkeypatch, capsys):
    script = Script(["x", "12", "1", "10"])
    monkeypatch.setattr(builtins, "input", script)
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out == INVALID_INPUT * 2 + report(10) + "\n"
    assert script.prompts[:3] == [MENU_PROMPT] * 3
    assert script.prompts[3] == NUMBER_PROMPT


def test_main_end_of_input(monkeypatch, capsys):
    monkeypatch.setattr(builtins, "input", Script([]))
    assert main() == 1
    assert capsys.readouterr().out == ""