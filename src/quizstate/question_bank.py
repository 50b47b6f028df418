import glob
import logging
import os
from typing import Dict, List, Optional

import pandas as pd

from .models import Answer, Question, QuestionType

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = {
    "question_id",
    "type",
    "text",
    "answer_id",
    "answer_text",
    "is_correct",
}

DEMO_QUESTION = Question(
    id="question1",
    type=QuestionType.UCQ,
    text="How are you?",
    answers=[
        Answer(id="answer1", text="good", is_correct=True),
        Answer(id="answer2", text="baad", is_correct=False),
    ],
)


def _to_bool(value) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in ("true", "1", "yes")


# --- Service Layer: Question Loading ---
class QuestionBank:
    """Loads questions from CSV files, one row per answer."""

    def __init__(self, directory: str):
        self.directory = directory
        self.questions: Dict[str, Question] = {}
        self.load_all()

    def load_all(self):
        self.questions = {}
        if not os.path.exists(self.directory):
            logger.warning(f"Question directory {self.directory} not found.")
        else:
            csv_files = sorted(glob.glob(os.path.join(self.directory, "*.csv")))
            for file_path in csv_files:
                try:
                    df = pd.read_csv(
                        file_path,
                        encoding="utf-8",
                        dtype=str,
                        keep_default_na=False,
                    )
                    missing = REQUIRED_COLUMNS - set(df.columns)
                    if missing:
                        logger.error(
                            f"Skipping {file_path}: Missing columns {sorted(missing)}."
                        )
                        continue
                    loaded = self._parse(df)
                    self.questions.update(loaded)
                    logger.info(f"Loaded {len(loaded)} questions from {file_path}")
                except Exception as e:
                    logger.error(f"Failed to load {file_path}: {e}")

        if not self.questions:
            logger.warning("No questions found. Loading demo question.")
            self.questions[DEMO_QUESTION.id] = DEMO_QUESTION

    def _parse(self, df: pd.DataFrame) -> Dict[str, Question]:
        questions = {}
        for question_id, rows in df.groupby("question_id", sort=False):
            first = rows.iloc[0]
            questions[question_id] = Question(
                id=question_id,
                type=QuestionType(str(first["type"]).strip().upper()),
                text=str(first["text"]),
                answers=[
                    Answer(
                        id=row["answer_id"],
                        text=str(row["answer_text"]),
                        is_correct=_to_bool(row["is_correct"]),
                    )
                    for _, row in rows.iterrows()
                ],
            )
        return questions

    def get_question(self, question_id: str) -> Optional[Question]:
        question = self.questions.get(question_id)
        if question is None:
            return None
        return question.model_copy(deep=True)

    def get_question_ids(self) -> List[str]:
        return list(self.questions.keys())
