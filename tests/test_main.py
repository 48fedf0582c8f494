import main
from main import run_game


def play(context, scripted_input, answers, **kwargs):
    output = []
    rounds = run_game(context, ask=scripted_input(answers), output=output.append, **kwargs)
    return rounds, output


def test_round_prints_the_winner(context, scripted_input):
    rounds, output = play(context, scripted_input, ["taco", "3"])
    assert rounds == 1
    assert "TACO, word worth 9 points." in output
    assert "All letters were used!" in output
    assert context.messages.title in output


def test_winner_with_leftover_letters(context, scripted_input):
    _, output = play(context, scripted_input, ["cats", "0"])
    assert "ACT, word worth 5 points." in output
    assert "Letters left over: S." in output


def test_invalid_bonus_asks_again(context, scripted_input):
    rounds, output = play(context, scripted_input, ["taco", "abc", "-2", "0"])
    assert rounds == 1
    assert output.count(context.messages.bonus_position_hint) == 2
    assert "COAT, word worth 6 points." in output


def test_letters_without_valid_characters_ask_again(context, scripted_input):
    rounds, output = play(context, scripted_input, ["123 !", "cat", "0"])
    assert rounds == 1
    assert context.messages.invalid_characters_warning in output
    assert "ACT, word worth 5 points." in output


def test_no_word_found(context, scripted_input):
    _, output = play(context, scripted_input, ["xyz", "1"])
    assert context.messages.no_word_found in output
    assert "Letters left over: X, Y, Z" in output


def test_several_rounds_until_input_ends(context, scripted_input):
    rounds, _ = play(context, scripted_input, ["cat", "0", "dog", "1", "taco"])
    assert rounds == 2


def test_max_rounds(context, scripted_input):
    rounds, _ = play(context, scripted_input, ["cat", "0", "dog", "1"], max_rounds=1)
    assert rounds == 1


def test_main_exits_with_error_on_bad_assets(tmp_path):
    assert main.main(["--assets", str(tmp_path)]) == 1


def test_main_plays_with_packaged_assets(monkeypatch, scripted_input):
    monkeypatch.setattr("builtins.input", scripted_input(["taco", "0"]))
    assert main.main([]) == 0
