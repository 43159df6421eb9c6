"""HTML fragments written into the output regions."""
from html import escape
from typing import Any, Optional

from comment_client.schemas.sentiment import Comment, StatisticsSummary


# Shown for any field the service left out of its answer
MISSING = "undefined"


def format_probability(probability: Optional[float]) -> str:
    """0.8765 -> '87.65%'"""
    if probability is None:
        return MISSING
    return f"{probability * 100:.2f}%"


def badge_class(prediction: Optional[str]) -> str:
    return prediction.lower() if prediction else ""


def _text(value: Any) -> str:
    if value is None:
        return MISSING
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return escape(str(value))


def render_prediction(comment: Comment) -> str:
    return (
        f"<strong>Prediction:</strong> {_text(comment.prediction)}<br>\n"
        f"<strong>Probability:</strong> {format_probability(comment.probability)}"
    )


def render_comment(comment: Comment, title: str = "Comment") -> str:
    return (
        '<div class="result-container">\n'
        '    <div class="result-row">\n'
        f'        <span class="result-label">{escape(title)}</span>\n'
        f'        <p class="result-text">{_text(comment.text)}</p>\n'
        '    </div>\n'
        '    <div class="result-row">\n'
        '        <span class="result-label">Prediction</span>\n'
        f'        <span class="result-badge {escape(badge_class(comment.prediction))}">'
        f'{_text(comment.prediction)}</span>\n'
        '    </div>\n'
        '    <div class="result-row">\n'
        '        <span class="result-label">Probability</span>\n'
        f'        <strong>{format_probability(comment.probability)}</strong>\n'
        '    </div>\n'
        '</div>'
    )


def render_stats(summary: StatisticsSummary) -> str:
    return (
        f"<p>Positive: {_text(summary.positive_percent)}%</p>\n"
        f"<p>Negative: {_text(summary.negative_percent)}%</p>"
    )


def batch_notice(record_count: Optional[int]) -> str:
    return f"File processed: {_text(record_count)} records"
