"""Conversion between stored JSON documents and the pydantic models.

Documents use camelCase keys, Mongo-style ``_id`` fields, and the empty
string for "not yet defined". Tees are stored either as a list or as a
mapping by name. All of that is normalized here and nowhere else.
"""

from typing import Any, Dict, List, Mapping

from models import Course, HoleScore, ScoreCard, Tournament


# ================================================================
# Sentinels
# ================================================================

def blank_to_none(value: Any) -> Any:
    """Recursively replace ``""`` with None."""
    if value == "":
        return None
    if isinstance(value, Mapping):
        return {k: blank_to_none(v) for k, v in value.items()}
    if isinstance(value, list):
        return [blank_to_none(v) for v in value]
    return value


def none_to_blank(value: Any) -> Any:
    """Recursively replace None with ``""``, except inside points."""
    if value is None:
        return ""
    if isinstance(value, Mapping):
        if "lat" in value and "lng" in value:
            return {k: v for k, v in value.items() if v is not None}
        return {k: none_to_blank(v) for k, v in value.items()}
    if isinstance(value, list):
        return [none_to_blank(v) for v in value]
    return value


def _with_id(doc: Mapping[str, Any]) -> Dict[str, Any]:
    data = dict(doc)
    if "_id" in data:
        data.setdefault("id", str(data.pop("_id")))
    return data


# ================================================================
# Document -> Model (reads)
# ================================================================

def tees_from_document(tees: Any) -> Dict[str, Dict[str, Any]]:
    """A list of tees, or a mapping by name, as an ordered mapping by name."""
    if not tees:
        return {}
    if isinstance(tees, Mapping):
        items = list(tees.items())
    else:
        items = [(tee.get("name"), tee) for tee in tees]
    normalized: Dict[str, Dict[str, Any]] = {}
    for name, tee in items:
        tee = dict(tee)
        tee.setdefault("name", name)
        normalized[tee["name"]] = tee
    return normalized


COURSE_DEFAULTED = ("numHoles", "sgMembership", "sgRoundDiscount", "sgStandingTeeTimes", "sgFriendlinessRating")
TEE_DEFAULTED = (
    "hasStartLine",
    "hasFinishLine",
    "numHolesGolfDataComplete",
    "numHolesPathDataComplete",
    "numHolesPolyDataComplete",
)
# An empty path or poly here means every feature is defined.
INSERTION_POINTS = ("pathInsertionPoint", "polyInsertionPoint")


def _drop_none(data: Dict[str, Any], keys) -> Dict[str, Any]:
    for key in keys:
        if key in data and data[key] is None:
            del data[key]
    return data


def tee_from_document(doc: Mapping[str, Any]) -> Dict[str, Any]:
    data = _drop_none(blank_to_none(dict(doc)), TEE_DEFAULTED)
    for key in INSERTION_POINTS:
        if isinstance(doc.get(key), Mapping):
            data[key] = dict(doc[key])
        else:
            data.pop(key, None)
    holes = []
    for number, hole in enumerate(data.get("holes") or [], start=1):
        hole = dict(hole)
        if hole.get("number") is None:
            hole["number"] = number
        holes.append(hole)
    data["holes"] = holes
    return data


def course_from_document(doc: Mapping[str, Any]) -> Course:
    """Stored course document -> Course model."""
    data = _with_id(doc)
    tees = tees_from_document(data.pop("tees", None))
    data = _drop_none(blank_to_none(data), COURSE_DEFAULTED)
    data["tees"] = {name: tee_from_document(tee) for name, tee in tees.items()}
    return Course.model_validate(data)


def _score_entry(hole: Any, entry: Any) -> Dict[str, Any]:
    if isinstance(entry, Mapping):
        score = dict(entry)
        score.setdefault("hole", hole)
        return score
    return {"hole": hole, "strokes": entry}


def _without_zero_strokes(score: Dict[str, Any]) -> Dict[str, Any]:
    # A cleared hole is saved as 0 strokes.
    strokes = score.get("strokes")
    if (isinstance(strokes, (int, float)) and strokes <= 0) or strokes == "0":
        score["strokes"] = None
    return score


def scores_from_document(scores: Any) -> List[HoleScore]:
    """Scores as a list of ``{hole, strokes, holeTime}`` or a mapping by hole."""
    if not scores:
        return []
    if isinstance(scores, Mapping):
        entries = [_score_entry(int(hole), blank_to_none(entry)) for hole, entry in scores.items()]
    else:
        entries = [blank_to_none(dict(entry)) for entry in scores]
    entries = [_without_zero_strokes(e) for e in entries]
    return sorted((HoleScore.model_validate(e) for e in entries), key=lambda s: s.hole)


def score_card_from_document(doc: Mapping[str, Any]) -> ScoreCard:
    """Stored scorecard -> ScoreCard, accepting the older field names."""
    data = blank_to_none(dict(doc))
    if data.get("total") is None and "totalScore" in data:
        data["total"] = data.pop("totalScore")
    if data.get("startTime") is None and "roundStartTime" in data:
        data["startTime"] = data.pop("roundStartTime")
    if data.get("finishTime") is None and "roundFinishTime" in data:
        data["finishTime"] = data.pop("roundFinishTime")
    data["scores"] = scores_from_document(data.get("scores"))
    return ScoreCard.model_validate(data)


def _player_from_document(doc: Mapping[str, Any]) -> Dict[str, Any]:
    data = blank_to_none(dict(doc))
    data["scoreCards"] = [score_card_from_document(c) for c in doc.get("scoreCards") or []]
    return data


def _round_from_document(doc: Mapping[str, Any]) -> Dict[str, Any]:
    data = _drop_none(blank_to_none(_with_id(doc)), ("numHoles",))
    # Dates are stored as ISO datetimes at midnight.
    if isinstance(data.get("date"), str):
        data["date"] = data["date"].split("T")[0]
    return data


def tournament_from_document(doc: Mapping[str, Any]) -> Tournament:
    """Stored tournament document -> Tournament model."""
    data = _with_id(doc)
    divisions = []
    for division_doc in data.get("divisions") or []:
        division = _drop_none(blank_to_none(_with_id(division_doc)), ("gender",))
        division["rounds"] = [_round_from_document(r) for r in division_doc.get("rounds") or []]
        division["players"] = [_player_from_document(p) for p in division_doc.get("players") or []]
        divisions.append(division)
    return Tournament(
        id=data.get("id"),
        name=data.get("name") or None,
        divisions=divisions,
        players=[_player_from_document(p) for p in data.get("players") or []],
    )


# ================================================================
# Model -> Document (writes)
# ================================================================

def course_to_document(course: Course, tees_as_list: bool = False) -> Dict[str, Any]:
    """Course model -> storable document with ``""`` for undefined fields."""
    doc = course.model_dump(by_alias=True, mode="json")
    course_id = doc.pop("id", None)
    doc = none_to_blank(doc)
    if course_id is not None:
        doc["_id"] = course_id
    if tees_as_list:
        doc["tees"] = list(doc["tees"].values())
    return doc


def score_card_to_document(card: ScoreCard) -> Dict[str, Any]:
    doc = card.model_dump(by_alias=True, mode="json")
    return none_to_blank(doc)
