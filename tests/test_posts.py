"""Tests for post submission, reactions, comments and the admin review queue."""

import asyncio
from datetime import datetime

import pytest
from fastapi import HTTPException

from kforum.controllers import admin_controller, post_controller
from kforum.controllers.post_controller import extract_hashtags, merge_tags, reaction_summary
from kforum.models.post_model import PostCategory, PostStatus, ReactionType
from kforum.schemas.post_schema import CommentCreateRequest, PostCreateRequest


def _create(db, title, content, category=PostCategory.GENERAL, user=None, **extra):
    data = PostCreateRequest(title=title, content=content, category=category, **extra)
    return asyncio.run(post_controller.create_post(data, user or db.author))


def test_extract_hashtags():
    assert extract_hashtags("Join #Hackathon and #AI_club!") == ["hackathon", "ai_club"]
    assert extract_hashtags("no tags here") == []


def test_merge_tags_dedupes_and_lowercases():
    assert merge_tags(["Events", " hackathon ", ""], ["hackathon", "ai"]) == ["events", "hackathon", "ai"]
    assert merge_tags(["#Fest"], []) == ["fest"]


def test_reaction_summary():
    reactions = [
        {"user_id": "u1", "type": "like"},
        {"user_id": "u2", "type": "love"},
        {"user_id": "u3", "type": "like"},
    ]
    summary = reaction_summary(reactions, "u2")
    assert summary["reaction_counts"]["like"] == 2
    assert summary["reaction_counts"]["angry"] == 0
    assert summary["total_reactions"] == 3
    assert summary["user_reaction"] == "love"
    assert reaction_summary([], None)["user_reaction"] is None


def test_clean_post_is_published(forum_db):
    out = _create(forum_db, "Hackathon this weekend", "Join us at the main lawn #hackathon #coding", tags=["Events"])
    assert out.message == "Post published successfully"
    assert out.post.status == PostStatus.PUBLISHED
    assert out.post.tags == ["events", "hackathon", "coding"]
    assert out.post.author.name == "Ravi"

    stored = forum_db.posts.docs[0]
    assert stored["moderation"]["is_unsafe"] is False
    assert stored["moderation"]["confidence"] == pytest.approx(0.1)
    assert stored["moderation"]["language"] == "en"


def test_unsafe_post_is_held_for_review(forum_db):
    out = _create(forum_db, "Rant", "Exam was shit", category=PostCategory.RANTS)
    assert out.post.status == PostStatus.PENDING_REVIEW
    assert "review" in out.message

    stored = forum_db.posts.docs[0]
    assert stored["moderation"]["is_unsafe"] is True
    assert stored["moderation"]["flagged_words"] == ["shit"]

    feed = asyncio.run(post_controller.list_posts(forum_db.author))
    assert feed == []


def test_held_post_visible_to_author_only(forum_db):
    out = _create(forum_db, "Rant", "Exam was shit")
    assert asyncio.run(post_controller.get_post(out.post.id, forum_db.author)).id == out.post.id
    with pytest.raises(HTTPException) as exc:
        asyncio.run(post_controller.get_post(out.post.id, forum_db.admin))
    assert exc.value.status_code == 404


def test_anonymous_post_hides_author(forum_db):
    out = _create(forum_db, "Lost keys", "Blue keychain near library", category=PostCategory.LOST_FOUND, is_anonymous=True)
    assert out.post.author is None
    assert out.post.is_anonymous is True


def test_event_date_only_kept_for_events(forum_db):
    when = datetime(2024, 3, 15, 18, 0)
    event = _create(forum_db, "Music night", "Open mic at the amphitheatre", category=PostCategory.EVENTS, event_date=when)
    general = _create(forum_db, "Music night", "Open mic at the amphitheatre", event_date=when)
    assert event.post.event_date == when
    assert general.post.event_date is None


def test_feed_filters_by_category(forum_db):
    _create(forum_db, "Lost keys", "Blue keychain near library", category=PostCategory.LOST_FOUND)
    _create(forum_db, "Music night", "Open mic at the amphitheatre", category=PostCategory.EVENTS)
    everything = asyncio.run(post_controller.list_posts(forum_db.author))
    events = asyncio.run(post_controller.list_posts(forum_db.author, category=PostCategory.EVENTS))
    assert len(everything) == 2
    assert [p.title for p in events] == ["Music night"]


def test_reaction_toggle_and_replace(forum_db):
    post_id = _create(forum_db, "Lost keys", "Blue keychain near library").post.id
    user = forum_db.author

    liked = asyncio.run(post_controller.react_to_post(post_id, ReactionType.LIKE, user))
    assert liked.reaction_counts["like"] == 1
    assert liked.user_reaction == ReactionType.LIKE

    loved = asyncio.run(post_controller.react_to_post(post_id, ReactionType.LOVE, user))
    assert loved.reaction_counts["like"] == 0
    assert loved.reaction_counts["love"] == 1
    assert loved.total_reactions == 1

    cleared = asyncio.run(post_controller.react_to_post(post_id, ReactionType.LOVE, user))
    assert cleared.total_reactions == 0
    assert cleared.user_reaction is None


def test_reacting_to_held_post_is_not_found(forum_db):
    post_id = _create(forum_db, "Rant", "Exam was shit").post.id
    with pytest.raises(HTTPException) as exc:
        asyncio.run(post_controller.react_to_post(post_id, ReactionType.LIKE, forum_db.admin))
    assert exc.value.status_code == 404


def test_bad_post_id_is_a_bad_request(forum_db):
    with pytest.raises(HTTPException) as exc:
        asyncio.run(post_controller.get_post("not-an-id", forum_db.author))
    assert exc.value.status_code == 400


def test_comments_are_moderated(forum_db):
    post_id = _create(forum_db, "Lost keys", "Blue keychain near library").post.id
    ok = asyncio.run(post_controller.add_comment(post_id, CommentCreateRequest(content="See you there"), forum_db.author))
    held = asyncio.run(post_controller.add_comment(post_id, CommentCreateRequest(content="you are so stupid"), forum_db.author))
    assert ok.status == PostStatus.PUBLISHED
    assert held.status == PostStatus.PENDING_REVIEW

    listed = asyncio.run(post_controller.list_comments(post_id))
    assert [c.content for c in listed] == ["See you there"]
    assert forum_db.posts.docs[0]["comment_count"] == 1

    asyncio.run(admin_controller.decide_comment(held.id, approve=True))
    listed = asyncio.run(post_controller.list_comments(post_id))
    assert len(listed) == 2
    assert forum_db.posts.docs[0]["comment_count"] == 2


def test_pending_queue_shows_confidence_and_censored_preview(forum_db):
    _create(forum_db, "Lost keys", "Blue keychain near library")
    held = _create(forum_db, "Rant", "Exam was shit").post

    pending = asyncio.run(admin_controller.list_pending_posts())
    assert [p.id for p in pending] == [held.id]
    info = pending[0].moderation
    assert info.is_unsafe is True
    assert info.confidence_percent == round(info.confidence * 100)
    assert info.source == "local"
    assert "shit" not in pending[0].preview
    assert pending[0].preview.startswith("Exam was ")


def test_approve_publishes_and_records_decision(forum_db):
    held = _create(forum_db, "Rant", "Exam was shit").post
    asyncio.run(admin_controller.approve_post(held.id, forum_db.admin))

    stored = forum_db.posts.docs[0]
    assert stored["status"] == "PUBLISHED"
    assert stored["admin_decision"]["decision"] == "APPROVED"
    assert stored["admin_decision"]["admin_id"] == str(forum_db.admin["_id"])
    assert len(asyncio.run(post_controller.list_posts(forum_db.author))) == 1


def test_reject_records_reason(forum_db):
    held = _create(forum_db, "Rant", "Exam was shit").post
    out = asyncio.run(admin_controller.reject_post(held.id, forum_db.admin, "Abusive language"))
    assert out["status"] == "REJECTED"
    stored = forum_db.posts.docs[0]
    assert stored["admin_decision"]["reason"] == "Abusive language"
    assert asyncio.run(admin_controller.list_pending_posts()) == []


def test_deciding_unknown_post_is_not_found(forum_db):
    with pytest.raises(HTTPException) as exc:
        asyncio.run(admin_controller.approve_post("65f000000000000000000000", forum_db.admin))
    assert exc.value.status_code == 404


def test_moderation_info_defaults():
    info = admin_controller.moderation_info(None)
    assert info.confidence == 0.0
    assert info.confidence_percent == 0
    assert info.language == "unknown"
    assert info.source == "none"
