from .converters import (
    blank_to_none,
    course_from_document,
    course_to_document,
    none_to_blank,
    score_card_from_document,
    score_card_to_document,
    scores_from_document,
    tees_from_document,
    tournament_from_document,
)
