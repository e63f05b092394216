"""Shared fixtures: an in-memory stand-in for the handful of motor collection calls the controllers make."""

import copy
from types import SimpleNamespace

import pytest
from bson import ObjectId


def _get(doc, dotted):
    cur = doc
    for part in dotted.split("."):
        if not isinstance(cur, dict) or part not in cur:
            return None
        cur = cur[part]
    return cur


def _values(doc, dotted):
    """Every value a dotted path reaches, looking inside arrays like Mongo does."""
    head, _, rest = dotted.partition(".")
    if not isinstance(doc, dict) or head not in doc:
        return []
    value = doc[head]
    if not rest:
        return value if isinstance(value, list) else [value]
    if isinstance(value, list):
        return [v for item in value for v in _values(item, rest)]
    return _values(value, rest)


def _set(doc, dotted, value):
    parts = dotted.split(".")
    cur = doc
    for part in parts[:-1]:
        cur = cur.setdefault(part, {})
    cur[parts[-1]] = value


def _matches(doc, flt):
    for key, expected in flt.items():
        found = _values(doc, key)
        if isinstance(expected, dict) and "$ne" in expected:
            if expected["$ne"] in found:
                return False
        elif isinstance(expected, dict) and "$gt" in expected:
            if not any(v is not None and v > expected["$gt"] for v in found):
                return False
        elif expected is None:
            if any(v is not None for v in found):
                return False
        elif expected not in found:
            return False
    return True


class FakeCursor:
    def __init__(self, docs):
        self._docs = docs

    def sort(self, key, direction=1):
        self._docs = sorted(self._docs, key=lambda d: _get(d, key), reverse=direction < 0)
        return self

    def skip(self, n):
        self._docs = self._docs[n:]
        return self

    def limit(self, n):
        self._docs = self._docs[:n]
        return self

    def __aiter__(self):
        return self._iter()

    async def _iter(self):
        for d in self._docs:
            yield d


class FakeCollection:
    def __init__(self, docs=None):
        self.docs = [copy.deepcopy(d) for d in (docs or [])]

    def _first(self, flt):
        return next((d for d in self.docs if _matches(d, flt)), None)

    def _apply(self, doc, update, flt=None):
        for k, v in update.get("$set", {}).items():
            if ".$." in k:
                self._set_positional(doc, k, copy.deepcopy(v), flt or {})
            else:
                _set(doc, k, copy.deepcopy(v))
        for k, v in update.get("$inc", {}).items():
            _set(doc, k, (_get(doc, k) or 0) + v)
        for k, v in update.get("$push", {}).items():
            doc.setdefault(k, []).append(copy.deepcopy(v))
        for k, cond in update.get("$pull", {}).items():
            doc[k] = [item for item in doc.get(k, []) if not _matches(item, cond)]

    @staticmethod
    def _set_positional(doc, key, value, flt):
        array, field = key.split(".$.")
        conds = {k[len(array) + 1:]: v for k, v in flt.items() if k.startswith(array + ".")}
        for item in doc.get(array, []):
            if _matches(item, conds):
                item[field] = value
                return

    def _upsert(self, flt, update):
        new = {k: v for k, v in flt.items() if "." not in k and not isinstance(v, dict)}
        new.update(copy.deepcopy(update.get("$setOnInsert", {})))
        self._apply(new, update)
        new.setdefault("_id", ObjectId())
        self.docs.append(new)
        return new

    def find(self, flt=None, projection=None):
        return FakeCursor([copy.deepcopy(d) for d in self.docs if _matches(d, flt or {})])

    async def find_one(self, flt, projection=None):
        doc = self._first(flt)
        return copy.deepcopy(doc) if doc else None

    async def find_one_and_update(self, flt, update, upsert=False, return_document=None):
        doc = self._first(flt)
        if doc is None:
            return copy.deepcopy(self._upsert(flt, update)) if upsert else None
        before = copy.deepcopy(doc)
        self._apply(doc, update, flt)
        return copy.deepcopy(doc) if return_document else before

    async def update_one(self, flt, update, upsert=False):
        doc = self._first(flt)
        if doc is None:
            if upsert:
                self._upsert(flt, update)
            return SimpleNamespace(matched_count=0, modified_count=0)
        self._apply(doc, update, flt)
        return SimpleNamespace(matched_count=1, modified_count=1)

    async def insert_one(self, doc):
        doc = copy.deepcopy(doc)
        doc.setdefault("_id", ObjectId())
        self.docs.append(doc)
        return SimpleNamespace(inserted_id=doc["_id"])

    async def delete_one(self, flt):
        doc = self._first(flt)
        if doc is not None:
            self.docs.remove(doc)
        return SimpleNamespace(deleted_count=1 if doc is not None else 0)

    async def count_documents(self, flt):
        return sum(1 for d in self.docs if _matches(d, flt))


@pytest.fixture
def wordle_db(monkeypatch):
    """Patch the wordle controller onto fresh fake collections; today's word is CRANE."""
    from kforum.controllers import wordle_controller

    user = {"_id": ObjectId(), "name": "Asha", "role": "student"}
    db = SimpleNamespace(
        users=FakeCollection([user]),
        daily_words=FakeCollection(),
        attempts=FakeCollection(),
        user_id=user["_id"],
    )
    monkeypatch.setattr(wordle_controller, "users_collection", db.users)
    monkeypatch.setattr(wordle_controller, "daily_words_collection", db.daily_words)
    monkeypatch.setattr(wordle_controller, "wordle_attempts_collection", db.attempts)

    async def fake_word():
        return "CRANE"

    async def fake_hint(word):
        return "Lifts heavy things"

    monkeypatch.setattr(wordle_controller, "generate_daily_word", fake_word)
    monkeypatch.setattr(wordle_controller, "generate_hint_for_word", fake_hint)
    return db


@pytest.fixture
def forum_db(monkeypatch):
    """Posts/comments controllers on fake collections, moderated by the local filter alone."""
    from kforum.controllers import admin_controller, post_controller
    from kforum.services.moderation_service import ModerationCascade

    author = {"_id": ObjectId(), "name": "Ravi", "student_id": "21CS042", "role": "student"}
    admin = {"_id": ObjectId(), "name": "Mod", "role": "moderator"}
    db = SimpleNamespace(
        users=FakeCollection([author, admin]),
        posts=FakeCollection(),
        comments=FakeCollection(),
        author=author,
        admin=admin,
    )
    for module in (post_controller, admin_controller):
        monkeypatch.setattr(module, "posts_collection", db.posts)
        monkeypatch.setattr(module, "comments_collection", db.comments)
    monkeypatch.setattr(post_controller, "users_collection", db.users)

    cascade = ModerationCascade(providers=[], detect_language=lambda text: "en")
    monkeypatch.setattr(post_controller, "moderate_text", cascade.moderate)
    return db
