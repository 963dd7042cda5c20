from codequest.models.quiz_result import QuizResult, Difficulty

__all__ = ["QuizResult", "Difficulty"]
