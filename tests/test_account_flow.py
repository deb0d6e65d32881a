"""Account page controller driven against the real API."""

import pytest

from postboard.account import AccountController, Navigator, Notifier, SessionContext


async def sign_up(posts_client, username):
    result = await posts_client.register(username, f"{username}@example.com", "Sup3rSecret!")
    assert result.success
    login = await posts_client.login(username, "Sup3rSecret!")
    return login.data


@pytest.mark.asyncio
async def test_account_page_flow(posts_client):
    alice = await sign_up(posts_client, "alice")
    bob = await sign_up(posts_client, "bob")

    first = (await posts_client.create_post(alice.id, "first", "https://img.example.com/1.png")).data
    second = (await posts_client.create_post(alice.id, "second", "https://img.example.com/2.png")).data
    await posts_client.create_post(bob.id, "bob's", "https://img.example.com/3.png")

    notifier = Notifier()
    controller = AccountController(posts_client, SessionContext(alice), notifier, Navigator("/account"))

    assert (await controller.load_posts()).ok
    assert [p.id for p in controller.posts] == [second.id, first.id]

    assert (await controller.toggle_like(first.id)).ok
    liked = controller.posts[1]
    assert liked.likes == [alice.id]
    assert liked.likes_count == 1
    assert notifier.last.title == "Post liked"

    assert (await controller.toggle_like(first.id)).ok
    assert controller.posts[1].likes == []
    assert controller.posts[1].likes_count == 0
    assert notifier.last.title == "Post unliked"

    controller.request_delete(controller.posts[0])
    assert (await controller.confirm_delete()).ok
    assert [p.id for p in controller.posts] == [first.id]

    remaining = await posts_client.list_posts()
    assert second.id not in [p.id for p in remaining.data]


@pytest.mark.asyncio
async def test_deleting_a_foreign_post_is_refused(posts_client):
    alice = await sign_up(posts_client, "alice")
    bob = await sign_up(posts_client, "bob")
    bobs_post = (await posts_client.create_post(bob.id, "bob's", "https://img.example.com/3.png")).data

    notifier = Notifier()
    controller = AccountController(posts_client, SessionContext(alice), notifier, Navigator("/account"))
    controller.posts = [bobs_post]

    controller.request_delete(bobs_post)
    result = await controller.confirm_delete()

    assert result.status == "failed"
    assert controller.posts == [bobs_post]
    assert notifier.last.title == "Delete failed"
    assert notifier.last.description == "You can only delete your own posts"
    assert controller.is_delete_dialog_open is False

    still_there = await posts_client.get_post(bobs_post.id)
    assert still_there.success
