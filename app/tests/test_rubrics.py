import json

from interview_core.models import Difficulty, Round
from interview_core.services.rubrics import (
    DEFAULT_EVALUATION_RUBRIC,
    DEFAULT_INTERVIEW_RUBRIC,
    RubricLibrary,
)


def test_from_json_file_reads_rubrics_and_weights(tmp_path):
    doc = {
        "rubrics": {
            "RCA": {"MEDIUM": {"title": "RCA M", "content": "rca body"}},
            "strategy": {"hard": {"title": "Strat H", "content": "strategy body"}},
            "NOT_A_ROUND": {"EASY": {"title": "x", "content": "y"}},
            "METRICS": {"IMPOSSIBLE": {"title": "x", "content": "y"}},
        },
        "weights": {
            "PRODUCT_STRATEGY": {"Strategic Framing": 0.5, "Bad": "x", "Neg": -1},
            "nope": {"A": 1},
        },
    }
    path = tmp_path / "rubrics.json"
    path.write_text(json.dumps(doc), encoding="utf-8")

    library = RubricLibrary.from_json(path)

    assert len(library) == 2
    assert library.get(Round.RCA, Difficulty.MEDIUM).content == "rca body"
    assert library.get(Round.PRODUCT_STRATEGY, Difficulty.HARD).title == "Strat H"
    assert library.weight_tables == {Round.PRODUCT_STRATEGY: {"Strategic Framing": 0.5}}


def test_content_defaults():
    library = RubricLibrary.from_json(
        {"rubrics": {"RCA": {"MEDIUM": {"title": "RCA", "content": "rca body"}}}}
    )

    assert library.content_for(Round.METRICS, Difficulty.EASY) == DEFAULT_INTERVIEW_RUBRIC
    assert library.evaluation_content_for(Round.METRICS, Difficulty.EASY) == "rca body"
    assert RubricLibrary().evaluation_content_for(Round.RCA, Difficulty.EASY) == (
        DEFAULT_EVALUATION_RUBRIC
    )


def test_from_directory_reads_text_files_by_bucket_name(tmp_path):
    (tmp_path / "product_improvement_easy.md").write_text("pi easy", encoding="utf-8")
    (tmp_path / "rca_HARD.txt").write_text("rca hard", encoding="utf-8")
    (tmp_path / "notes.md").write_text("ignored", encoding="utf-8")
    (tmp_path / "rca_medium.docx").write_text("ignored", encoding="utf-8")

    library = RubricLibrary.from_directory(tmp_path)

    assert len(library) == 2
    assert library.get(Round.PRODUCT_IMPROVEMENT, Difficulty.EASY).content == "pi easy"
    assert library.get(Round.RCA, Difficulty.HARD).content == "rca hard"


def test_from_directory_skips_files_that_are_not_utf8(tmp_path):
    (tmp_path / "rca_medium.md").write_bytes(b"\xff\xfePractice Questions:\n- \xe9t\xe9")
    (tmp_path / "rca_easy.md").write_text("rca easy", encoding="utf-8")

    library = RubricLibrary.from_directory(tmp_path)

    assert len(library) == 1
    assert library.get(Round.RCA, Difficulty.EASY).content == "rca easy"
    assert library.get(Round.RCA, Difficulty.MEDIUM) is None


def test_bundled_rubrics_have_practice_questions():
    from interview_core.config import DEFAULT_RUBRICS_PATH
    from interview_core.services.question_bank import QuestionBank

    bank = QuestionBank.from_library(RubricLibrary.from_json(DEFAULT_RUBRICS_PATH))

    assert len(bank.get(Round.PRODUCT_IMPROVEMENT, Difficulty.EASY)) == 5
    assert len(bank.get(Round.RCA, Difficulty.MEDIUM)) == 3
    assert len(bank.get(Round.PRODUCT_STRATEGY, Difficulty.MEDIUM)) == 4
