import random

import pytest

from parlor.common.io_interface import DummyIOInterface, TestIOInterface
from parlor.events import EngineEventType, EventBus
from parlor.rps.game import RPSGame, decide_winner, main, parse_args
from parlor.rps.move import Move
from parlor.rps.personality import CLAPTRAP, MR_GUTSY, Personality
from parlor.rps.rules import RPSRules

ALWAYS_ROCK = Personality("Rocky", (Move.ROCK,), "Rocky wins", "Rocky loses")


def make_game(moves, personality=ALWAYS_ROCK, confirmations=(), rematches=(), **kwargs):
    io_interface = TestIOInterface(
        moves=moves, names=["Ann"], confirmations=confirmations, rematches=rematches
    )
    game = RPSGame(io_interface, personality=personality, show_rules=False, **kwargs)
    game.seat_human()
    return game, io_interface


def test_spock_beats_rock():
    game, io_interface = make_game([Move.SPOCK])
    result = game.play_round()

    assert result.human_move is Move.SPOCK
    assert result.computer_move is Move.ROCK
    assert result.winner is game.human
    assert (game.human.score, game.computer.score) == (1, 0)
    assert io_interface.reported("score") == [((("Ann", 1), ("Rocky", 0)),)]


def test_tie_scores_nothing():
    game, io_interface = make_game([Move.ROCK])
    result = game.play_round()

    assert result.is_tie
    assert (game.human.score, game.computer.score) == (0, 0)
    assert io_interface.reported("round_outcome") == [(None,)]


def test_computer_scores_when_it_wins():
    game, _ = make_game([Move.SCISSORS])
    assert game.play_round().winner is game.computer
    assert (game.human.score, game.computer.score) == (0, 1)


def test_decide_winner():
    game, _ = make_game([Move.LIZARD])
    game.human.choose()
    game.computer.choose()
    assert decide_winner(game.human, game.computer) is game.computer
    assert decide_winner(game.computer, game.human) is game.computer


def test_game_ends_exactly_at_winning_score():
    # Mix in ties and losses; the game must stop on the human's eighth point
    moves = [Move.PAPER, Move.ROCK, Move.SCISSORS] * 8 + [Move.PAPER] * 5
    game, io_interface = make_game(list(moves))
    winner = game.play_game()

    assert winner is game.human
    assert game.human.score == 8
    assert game.computer.score < 8
    previous = (0, 0)
    for human_score, computer_score in (
        (scores[0][1], scores[1][1]) for (scores,) in io_interface.reported("score")
    ):
        gained = (human_score - previous[0], computer_score - previous[1])
        assert gained in {(0, 0), (1, 0), (0, 1)}
        assert max(previous) < 8
        previous = (human_score, computer_score)
    assert max(previous) == 8
    assert len(io_interface.moves) == 7


def test_computer_can_win_the_game():
    game, io_interface = make_game([Move.SCISSORS] * 8)
    assert game.play_game() is game.computer
    assert game.computer.score == 8
    assert io_interface.reported("match_winner") == [("Rocky",)]
    assert "Rocky wins" in io_interface.sent_messages


def test_losing_personality_taunt():
    game, io_interface = make_game([Move.PAPER] * 8)
    game.play_game()
    assert "Rocky loses" in io_interface.sent_messages


def test_custom_winning_score():
    game, _ = make_game([Move.PAPER] * 3, rules=RPSRules(winning_score=3))
    game.play_game()
    assert game.human.score == 3
    assert len(game.rounds) == 3


def test_rematch_resets_scores_but_not_history():
    # The move history outlives a single game: only the scores are reset.
    # History is declined after the first game and shown after the second.
    moves = [Move.PAPER] * 8 + [Move.SCISSORS] * 8
    game, io_interface = make_game(
        moves, confirmations=[False, True], rematches=[True, False]
    )
    winners = game.play()

    assert winners == [game.human, game.computer]
    assert game.human.score == 0
    assert game.computer.score == 8
    assert len(game.human.move_history) == 16
    assert len(game.computer.move_history) == 16
    history_lines = [m for m in io_interface.sent_messages if m.startswith("Ann's moves:")]
    assert len(history_lines) == 1
    assert history_lines[0].count("paper") == 8


def test_play_greets_and_says_goodbye():
    game, io_interface = make_game([Move.PAPER] * 8)
    game.play()
    assert io_interface.sent_messages[0] == "Welcome, Ann!"
    assert "Your opponent is Rocky." in io_interface.sent_messages[1]
    assert io_interface.sent_messages[-1] == "Thanks for playing, Ann. Goodbye!"


def test_rules_shown_on_request():
    io_interface = TestIOInterface(
        moves=[Move.PAPER] * 8, names=["Ann"], confirmations=[True]
    )
    RPSGame(io_interface, personality=ALWAYS_ROCK).play()
    assert any("Spock smashes scissors" in m for m in io_interface.sent_messages)


def test_events():
    events = []
    EventBus.get_instance().on_any(events.append)
    game, _ = make_game([Move.PAPER] * 8)
    game.play_game()

    names = [name for name, _ in events]
    assert names.count("MOVE_CHOSEN") == 16
    assert names.count("ROUND_ENDED") == 8
    assert names[-1] == "MATCH_ENDED"
    assert events[-1][1] == {"winner": "Ann", "human": 8, "computer": 0}


def test_score_updated_payload():
    updates = []
    EventBus.get_instance().on(EngineEventType.SCORE_UPDATED, updates.append)
    game, _ = make_game([Move.SPOCK])
    game.play_round()
    assert updates == [{"human": 1, "computer": 0}]


def test_scores_stay_apart_when_names_match():
    updates = []
    EventBus.get_instance().on(EngineEventType.SCORE_UPDATED, updates.append)
    io_interface = TestIOInterface(moves=[Move.SPOCK, Move.SCISSORS])
    game = RPSGame(io_interface, personality=ALWAYS_ROCK, show_rules=False)
    game.seat_human("Rocky")

    game.play_round()
    game.play_round()

    assert game.human.name == game.computer.name
    assert updates == [{"human": 1, "computer": 0}, {"human": 1, "computer": 1}]
    assert game.scores() == {"human": 1, "computer": 1}


def test_computer_personality_fixed_for_session():
    io_interface = DummyIOInterface(rematches=3, rng=random.Random(2))
    game = RPSGame(io_interface, rng=random.Random(2), show_rules=False)
    personality = game.computer.personality
    game.play()
    assert game.computer.personality is personality
    assert len(game.game_winners) == 4


def test_simulated_games_always_finish():
    io_interface = DummyIOInterface(rng=random.Random(5))
    game = RPSGame(io_interface, personality=CLAPTRAP, rng=random.Random(5), show_rules=False)
    game.seat_human()
    for _ in range(20):
        winner = game.play_game()
        assert winner.score == 8
        loser = game.computer if winner is game.human else game.human
        assert loser.score < 8
        game.human.reset()
        game.computer.reset()


def test_rules_validation():
    with pytest.raises(ValueError):
        RPSRules(winning_score=0)
    assert RPSRules().to_dict() == {"winning_score": 8}
    assert RPSRules().is_winning_score(8)
    assert not RPSRules().is_winning_score(7)


def test_parse_args():
    args = parse_args(["-s", "5", "-w", "3"])
    assert args.simulate == 5
    assert args.winning_score == 3
    assert parse_args([]).winning_score == 8


def test_main_simulation(capsys):
    main(["--simulate", "10", "--seed", "1"])
    out = capsys.readouterr().out
    assert "Finished playing 10 games" in out


def test_main_transcript(tmp_path):
    log_file = tmp_path / "rps.log"
    main(["--simulate", "1", "--seed", "1", "--log-file", str(log_file)])
    transcript = log_file.read_text(encoding="utf-8")
    assert "[NAME] Player" in transcript
    assert "[MOVE] Player:" in transcript
    assert "wins the game!" in transcript


def test_gutsy_never_throws_paper():
    game, _ = make_game([Move.SPOCK] * 50, personality=MR_GUTSY, rng=random.Random(0))
    for _ in range(50):
        game.play_round()
    assert Move.PAPER not in game.computer.move_history
