import pytest
from elimsolver import (
    ContractViolation, InconsistentState, GuessResult, INITIAL_RESULT, Dictionary,
    simulate_feedback,
)
from elimsolver.solvers import create_solver, get_solver_ids
from elimsolver.solvers.letter_freq import (
    LetterFreqSolver, letter_document_counts, score_word, select_best_candidate,
)

WORDS = ["crane", "trace", "tread", "react"]


def _result(guess, answer, turn):
    return GuessResult(word=guess, feedback=simulate_feedback(guess, answer), turn=turn, is_valid=True)


def _play(solver, answer, max_turns=50):
    """Drive one game against `answer`; returns the list of guesses."""
    solver.reset()
    guesses = []
    prev = INITIAL_RESULT
    for turn in range(1, max_turns + 1):
        guess = solver.next_guess(prev)
        guesses.append(guess)
        if guess == answer:
            return guesses
        prev = _result(guess, answer, turn)
    raise AssertionError(f"not solved in {max_turns} turns: {guesses}")


def _boom(candidates):
    raise AssertionError("scorer must not be called")


def test_registry_lists_letter_freq():
    assert "letter_freq" in get_solver_ids()
    solver = create_solver("letter_freq", Dictionary.from_words(WORDS))
    assert isinstance(solver, LetterFreqSolver)
    with pytest.raises(ValueError):
        create_solver("nope", WORDS)


def test_opener_is_fixed_regardless_of_dictionary():
    for words in (WORDS, ["zzzzz"], ["abcde", "fghij"]):
        solver = LetterFreqSolver(Dictionary.from_words(words))
        solver.reset()
        assert solver.next_guess(INITIAL_RESULT) == "audio"
        assert solver.next_guess(INITIAL_RESULT) == "audio"
        # opener does not touch the candidates
        assert len(solver.candidates) == len(words)


def test_reset_restores_full_dictionary():
    d = Dictionary.from_words(WORDS)
    solver = LetterFreqSolver(d)
    solver.reset()
    solver.next_guess(_result("audio", "trace", 1))
    assert len(solver.candidates) < len(d)
    solver.reset()
    solver.reset()
    assert solver.candidates == d.words
    # the shared dictionary is never mutated
    assert d.words == tuple(WORDS)


def test_end_to_end_trace():
    solver = LetterFreqSolver(Dictionary.from_words(WORDS))
    solver.reset()
    assert solver.next_guess(INITIAL_RESULT) == "audio"

    # 'tread' is the only word with a 'd', so audio's Y---- feedback removes it
    guess = solver.next_guess(_result("audio", "trace", 1))
    assert solver.candidates == ("crane", "trace", "react")
    # trace and react tie at 14; trace comes first
    assert guess == "trace"

    final = solver.next_guess(_result("trace", "trace", 2))
    assert solver.candidates == ("trace",)
    assert final == "trace"


def test_candidates_never_grow():
    words = ["crane", "trace", "tread", "react", "cared", "racer", "arose", "stare", "raise", "scare"]
    solver = LetterFreqSolver(Dictionary.from_words(words))
    solver.reset()
    prev = INITIAL_RESULT
    sizes = [len(solver.candidates)]
    answer = "scare"
    for turn in range(1, 20):
        guess = solver.next_guess(prev)
        sizes.append(len(solver.candidates))
        if guess == answer:
            break
        prev = _result(guess, answer, turn)
    assert guess == answer
    assert all(b <= a for a, b in zip(sizes, sizes[1:]))


def test_every_answer_is_eventually_found():
    words = ["crane", "trace", "tread", "react", "cared", "racer", "arose", "stare", "raise", "scare"]
    d = Dictionary.from_words(words)
    solver = LetterFreqSolver(d)
    for answer in d:
        guesses = _play(solver, answer)
        assert guesses[0] == "audio"
        assert guesses[-1] == answer


def test_single_candidate_skips_scoring():
    solver = LetterFreqSolver(Dictionary.from_words(WORDS), scorer=_boom)
    solver.reset()
    # crane vs trace -> YGG-G, which only trace reproduces
    assert solver.next_guess(_result("crane", "trace", 1)) == "trace"
    assert solver.candidates == ("trace",)


def test_injected_scorer_used_when_several_remain():
    solver = LetterFreqSolver(Dictionary.from_words(WORDS), scorer=lambda c: c[-1])
    solver.reset()
    assert solver.next_guess(_result("audio", "trace", 1)) == "react"


def test_inconsistent_feedback_raises():
    solver = LetterFreqSolver(Dictionary.from_words(WORDS))
    solver.reset()
    bad = GuessResult.from_pattern("zzzzz", "GGGGG", turn=1)
    with pytest.raises(InconsistentState) as ei:
        solver.next_guess(bad)
    assert ei.value.result is bad
    assert solver.candidates == ()


def test_invalid_previous_result_is_contract_violation():
    solver = LetterFreqSolver(Dictionary.from_words(WORDS))
    solver.reset()
    with pytest.raises(ContractViolation):
        solver.next_guess(GuessResult(word="xyzzy", turn=2, is_valid=False))
    # turn 0 is allowed to be "invalid": it's the start-of-game marker
    assert solver.next_guess(GuessResult(turn=0, is_valid=False)) == "audio"


def test_letter_counts_are_per_word_not_per_occurrence():
    counts = letter_document_counts(["geese", "eerie", "sassy"])
    assert counts["e"] == 2
    assert counts["s"] == 2
    assert counts["a"] == 1
    # 'e' counted once in geese even though it appears three times
    assert score_word("geese", counts) == counts["g"] + counts["e"] + counts["s"]


def test_select_best_candidate_picks_highest():
    # crane and arose tie at 8, bumpy 7, fuzzy 6
    assert select_best_candidate(["crane", "bumpy", "arose", "fuzzy"]) == "crane"
    assert select_best_candidate(["fuzzy", "crane", "crate", "trace"]) == "crate"


@pytest.mark.parametrize("words,expected", [
    (["trace", "react"], "trace"),
    (["react", "trace"], "react"),
    (["cared", "raced", "arced"], "cared"),
])
def test_tie_break_is_first_in_list_order(words, expected):
    for _ in range(5):
        assert select_best_candidate(words) == expected


def test_select_best_candidate_empty():
    with pytest.raises(ValueError):
        select_best_candidate([])


def test_reset_with_one_shot_iterable_keeps_full_list():
    solver = LetterFreqSolver(w for w in WORDS)
    solver.reset()
    first = solver.candidates
    solver.next_guess(_result("audio", "trace", 1))
    solver.reset()
    assert first == solver.candidates == tuple(WORDS)


def test_new_solver_starts_with_full_candidates():
    # no explicit reset(): a fresh solver is ready for its first game
    solver = LetterFreqSolver(Dictionary.from_words(WORDS), scorer=_boom)
    assert solver.candidates == tuple(WORDS)
    assert solver.next_guess(_result("crane", "trace", 1)) == "trace"
