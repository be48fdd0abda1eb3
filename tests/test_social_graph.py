# tests/test_social_graph.py
"""Tests for subscriptions and upvote attribution."""

import threading

from forumhub.models.forum import Post
from forumhub.repositories.document_repo import COMMUNITIES_KEY, USERS_KEY
from forumhub.services.content_store import ContentStore


def test_subscribe(store, graph, community, author, repository) -> None:
    assert graph.subscribe(author.id, community.id) is True
    assert store.find_user_by_id(author.id).subscriptions == [community.id]
    assert repository.load(USERS_KEY)[0]["subscriptions"] == [community.id]


def test_subscribe_twice_is_noop(store, graph, community, author) -> None:
    graph.subscribe(author.id, community.id)
    assert graph.subscribe(author.id, community.id) is False
    assert store.find_user_by_id(author.id).subscriptions == [community.id]


def test_subscribe_unknown_user_is_noop(store, graph, community) -> None:
    assert graph.subscribe("ghost", community.id) is False
    assert store.find_user_by_id("ghost") is None


def test_subscribe_to_missing_community_is_recorded(store, graph, author) -> None:
    assert graph.subscribe(author.id, "nowhere") is True
    assert store.find_user_by_id(author.id).subscriptions == ["nowhere"]


def test_repeated_upvotes_all_count(store, graph, community, author) -> None:
    post = store.create_post(community.id, "Dune", "", author.id)
    for _ in range(5):
        updated = graph.upvote(post.id, "u2")

    assert updated.upvotes == 5
    receipts = store.find_user_by_id(author.id).upvotes_received
    assert len(receipts) == 5
    assert {r.upvoter_id for r in receipts} == {"u2"}
    assert {r.post_id for r in receipts} == {post.id}


def test_upvote_without_known_author(store, graph, community) -> None:
    orphan = Post(title="Orphan", content="", author="ghost")
    with store.lock:
        store.community_record(community.id).posts.append(orphan)

    updated = graph.upvote(orphan.id, "u2")
    assert updated.upvotes == 1
    assert all(user.upvotes_received == [] for user in store.users)


def test_upvote_missing_post(graph) -> None:
    assert graph.upvote("missing", "u2") is None


def test_upvote_is_persisted(store, graph, community, author, repository) -> None:
    post = store.create_post(community.id, "Dune", "", author.id)
    graph.upvote(post.id, "u2")

    stored_post = repository.load(COMMUNITIES_KEY)[0]["posts"][0]
    assert stored_post["upvotes"] == 1
    receipt = repository.load(USERS_KEY)[0]["upvotesReceived"][0]
    assert receipt["postId"] == post.id
    assert receipt["upvoterId"] == "u2"

    reloaded = ContentStore.load(repository)
    assert reloaded.find_post_by_id(post.id).upvotes == 1


def test_concurrent_upvotes_do_not_interleave(store, graph, community, author) -> None:
    post = store.create_post(community.id, "Dune", "", author.id)

    def worker(voter: str) -> None:
        for _ in range(25):
            graph.upvote(post.id, voter)

    threads = [threading.Thread(target=worker, args=(f"v{i}",)) for i in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert store.find_post_by_id(post.id).upvotes == 100
    assert len(store.find_user_by_id(author.id).upvotes_received) == 100
