import pytest

from entroguess.config import SolverConfig
from entroguess.engine import (
    ContradictionError, GuessRecord, MaskDecodeError, compute, eligible, narrow,
)
from entroguess.harness import (
    OracleFeedback, ScriptedFeedback, Session, SolverState, run_batch, run_case,
)
from entroguess.rankers import create_ranker

DICT = ["abce", "abde", "abcf"]


def _session(words, feedback=None, on_round=None, **cfg):
    config = SolverConfig(word_length=cfg.pop("word_length", 4), **cfg)
    return Session(words, config=config, ranker=create_ranker("entropy"),
                   feedback=feedback or ScriptedFeedback([]), on_round=on_round)


def test_first_record_all_correct_converges():
    result = _session(DICT).run(GuessRecord.parse("abce", "CCCC"))
    assert result.state is SolverState.CONVERGED
    assert result.candidates == ["abce"]
    assert result.answer == "abce"
    assert result.rounds == 0


def test_first_record_last_letter_absent():
    first = GuessRecord.parse("abce", "CCCA")
    expected = [w for w in DICT if compute(w, "abce") == first.pattern]
    result = _session(DICT).run(first)
    assert result.candidates == expected == ["abcf"]
    assert result.state is SolverState.CONVERGED


def test_inconsistent_first_record_is_contradiction():
    # no dictionary word reproduces MMMM for this guess
    result = _session(DICT).run(GuessRecord.parse("abce", "MMMM"))
    assert result.state is SolverState.CONTRADICTION
    assert result.candidates == []
    assert result.answer is None
    with pytest.raises(ContradictionError):
        result.raise_for_state()


def test_loop_rounds_until_converged():
    words = ["crane", "crate", "crave", "craze", "grace", "trace"]
    reports = []
    answer = "crave"
    first = GuessRecord("crane", compute(answer, "crane"))
    second = GuessRecord("crate", compute(answer, "crate"))
    third = GuessRecord("crave", compute(answer, "crave"))
    session = _session(words, ScriptedFeedback([second, third]), reports.append,
                       word_length=5, top=3)
    result = session.run(first)

    assert result.state is SolverState.CONVERGED
    assert result.answer == answer
    assert result.history[0] == first
    assert len(reports) == result.rounds
    # each round shows at most `top` suggestions, best first
    r1 = reports[0]
    assert r1.round == 1 and len(r1.suggestions) <= 3
    assert r1.suggestions == sorted(r1.suggestions, key=lambda s: -s.entropy)
    assert set(r1.candidates) == set(narrow(words, first))


def test_candidate_set_only_shrinks():
    words = ["crane", "crate", "crave", "craze", "grace", "trace", "brace", "place"]
    answer = "craze"
    script = [GuessRecord(g, compute(answer, g)) for g in ["trace", "crave", "craze"]]
    sizes = []
    session = _session(words, ScriptedFeedback(script),
                       lambda rep: sizes.append(len(rep.candidates)), word_length=5)
    result = session.run(GuessRecord("place", compute(answer, "place")))
    sizes.append(len(result.candidates))
    assert sizes == sorted(sizes, reverse=True)
    assert result.state is SolverState.CONVERGED


def test_contradiction_mid_game():
    words = ["crane", "crate", "crave"]
    first = GuessRecord.parse("crane", "CCCAC")   # crate or crave
    bad = GuessRecord.parse("crate", "AAAAA")     # nothing left
    result = _session(words, ScriptedFeedback([bad]), word_length=5).run(first)
    assert result.state is SolverState.CONTRADICTION
    assert result.rounds == 1
    assert result.history == [first, bad]


def test_feedback_exhaustion_propagates():
    words = ["crane", "crate", "crave"]
    session = _session(words, ScriptedFeedback([]), word_length=5)
    with pytest.raises(EOFError):
        session.run(GuessRecord.parse("crane", "CCCAC"))
    assert session.state is SolverState.AWAITING_FEEDBACK


def test_wrong_length_guess_rejected():
    with pytest.raises(MaskDecodeError):
        _session(DICT).run(GuessRecord.parse("abc", "CCC"))


def test_session_runs_once_and_step_needs_ranking():
    session = _session(DICT)
    session.run(GuessRecord.parse("abce", "CCCC"))
    with pytest.raises(RuntimeError):
        session.run(GuessRecord.parse("abce", "CCCC"))
    with pytest.raises(RuntimeError):
        session.step()


def test_prefix_restricts_candidates():
    words = ["sabce", "sabde", "tabce"]
    session = _session(words, word_length=5, prefix="s")
    assert session.eligible == ["sabce", "sabde"]
    result = session.run(GuessRecord.parse("sabce", "CCCCC"))
    assert result.answer == "sabce"


def test_oracle_feedback_needs_a_round():
    with pytest.raises(RuntimeError):
        OracleFeedback("crane")()


def test_run_case_solves():
    words = ["crane", "raise", "stare", "trace", "cared", "adieu", "alone", "slate"]
    config = SolverConfig(word_length=5)
    r = run_case("stare", words, config=config, ranker=create_ranker("entropy"),
                 first_guess="crane")
    assert r["success"] is True
    assert r["state"] == "converged"
    assert r["history"][0] == ("crane", "AMCAC")
    assert r["guesses"] >= len(r["history"])


def test_run_case_first_guess_is_answer():
    words = ["crane", "raise", "stare"]
    r = run_case("crane", words, config=SolverConfig(word_length=5),
                 ranker=create_ranker("entropy"), first_guess="crane")
    assert r["success"] is True and r["guesses"] == 1


def test_run_batch_sample():
    words = ["crane", "raise", "stare", "trace", "cared"]
    results = run_batch(words, words, config=SolverConfig(word_length=5),
                        ranker=create_ranker("entropy"), first_guess="slate", sample=3)
    assert [r["answer"] for r in results] == eligible(words, 5)[:3]
    assert all(r["success"] for r in results)


def test_duplicate_dictionary_words_still_converge():
    s = _session(["abce", "abce", "abde"])
    result = s.run(GuessRecord.parse("abce", "CCCC"))
    assert result.state is SolverState.CONVERGED
    assert result.answer == "abce"


def test_run_case_with_duplicated_answer_in_dictionary():
    words = ["crane", "crane", "crate", "crave"]
    r = run_case("crane", words, config=SolverConfig(word_length=5),
                 ranker=create_ranker("entropy"), first_guess="crate")
    assert r["success"] is True
    assert r["state"] == "converged"
    assert r["history"] == [("crate", "CCCAC"), ("crane", "CCCCC")]
    assert r["guesses"] == 2


def test_run_case_counts_final_guess_when_answer_not_yet_played():
    words = ["abce", "abde", "abcf"]
    r = run_case("abcf", words, config=SolverConfig(word_length=4),
                 ranker=create_ranker("entropy"), first_guess="abce")
    assert r["history"] == [("abce", "CCCA")]
    assert r["guesses"] == 2
