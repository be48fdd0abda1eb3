"""forumhub command line.

Commands:
    forumhub init-db               create the document table
    forumhub serve [--interactive] run the HTTP API (optionally with the prompt loop)
    forumhub shell                 run the prompt loop only

The prompt loop accepts the same textual commands as the original terminal
front-end and calls the same store operations as the API.
"""

from __future__ import annotations

import threading
from collections.abc import Callable

import click

from forumhub.api.v1.dependencies import get_content_store
from forumhub.core.errors import DuplicateIdentityError, PersistenceError
from forumhub.core.logging import configure_logging
from forumhub.core.settings import settings
from forumhub.services.content_store import ContentStore
from forumhub.services.social_graph import SocialGraph


class CommandShell:
    """Line-oriented prompt over a :class:`ContentStore`."""

    def __init__(self, store: ContentStore) -> None:
        self.store = store
        self.graph = SocialGraph(store)
        self.commands: dict[str, Callable[[], None]] = {
            "user creates subreddit": self.create_community,
            "user subscribes to a post": self.subscribe,
            "user creates a post": self.create_post,
            "user adds comment": self.add_comment,
            "user upvotes post": self.upvote,
            "create user": self.create_user,
            "help": self.help,
        }

    @staticmethod
    def ask(text: str) -> str:
        return click.prompt(text, default="", show_default=False, prompt_suffix=": ").strip()

    def create_community(self) -> None:
        name = self.ask("Enter subreddit name")
        description = self.ask("Enter subreddit description")
        community = self.store.create_community(name, description)
        click.echo(f"Subreddit created: {community.name} ({community.id})")

    def subscribe(self) -> None:
        user_id = self.ask("Enter user ID")
        community_id = self.ask("Enter subreddit ID to subscribe")
        self.graph.subscribe(user_id, community_id)
        click.echo(f"User {user_id} subscribed to subreddit {community_id}")

    def create_post(self) -> None:
        community_id = self.ask("Enter subreddit ID to post in")
        title = self.ask("Enter post title")
        content = self.ask("Enter post content")
        user_id = self.ask("Enter user ID")
        post = self.store.create_post(community_id, title, content, user_id)
        if post is None:
            click.echo(f"Subreddit {community_id} or user {user_id} not found.")
            return
        click.echo(f"New post created in subreddit {community_id}: {post.title} ({post.id})")

    def add_comment(self) -> None:
        post_id = self.ask("Enter post ID to comment on")
        text = self.ask("Enter comment text")
        author = self.ask("Enter comment author")
        comment = self.store.add_comment(post_id, text, author)
        if comment is None:
            click.echo(f"Post with ID {post_id} not found.")
            return
        click.echo(f"New comment added to post {post_id}: {comment.text}")

    def upvote(self) -> None:
        post_id = self.ask("Enter post ID to upvote")
        user_id = self.ask("Enter user ID who is upvoting")
        post = self.graph.upvote(post_id, user_id)
        if post is None:
            click.echo(f"Post with ID {post_id} not found.")
            return
        click.echo(f"Post {post_id} upvoted. Current upvotes: {post.upvotes}")

    def create_user(self) -> None:
        user_id = self.ask("Enter user ID")
        try:
            user = self.store.create_user(user_id)
        except DuplicateIdentityError as exc:
            click.echo(str(exc))
            return
        click.echo(f"User created: {user.id}")

    def help(self) -> None:
        for name in self.commands:
            click.echo(f"  {name}")
        click.echo("  exit")

    def run(self) -> None:
        """Read commands until ``exit`` or end of input."""
        while True:
            try:
                line = click.prompt(
                    "Enter command", default="", show_default=False, prompt_suffix=": "
                ).strip()
            except click.Abort:
                break
            if line == "exit":
                break
            if not line:
                continue
            handler = self.commands.get(line)
            if handler is None:
                click.echo("Invalid command")
                continue
            try:
                handler()
            except click.Abort:
                break
            except PersistenceError as exc:
                click.echo(f"Warning: {exc}", err=True)
        click.echo("Terminal session closed")


@click.group()
@click.option("--log-level", default=None, help="Override LOG_LEVEL.")
def main(log_level: str | None) -> None:
    """Community forum backend."""
    configure_logging(log_level or settings.log_level, json_output=settings.log_json)


@main.command("init-db")
def init_db() -> None:
    """Create the document table if it does not exist."""
    from forumhub.db.session import create_tables

    create_tables()
    click.echo("Database initialized.")


@main.command()
def shell() -> None:
    """Run the interactive prompt loop."""
    CommandShell(get_content_store()).run()


@main.command()
@click.option("--host", default=None, help="Bind address (default: HOST).")
@click.option("--port", default=None, type=int, help="Bind port (default: PORT).")
@click.option("--interactive", is_flag=True, help="Also run the prompt loop.")
def serve(host: str | None, port: int | None, interactive: bool) -> None:
    """Run the HTTP API."""
    import uvicorn

    from forumhub.main import app

    config = uvicorn.Config(
        app,
        host=host or settings.host,
        port=port or settings.port,
        log_level=settings.log_level.lower(),
    )
    server = uvicorn.Server(config)
    if not interactive:
        server.run()
        return

    store = get_content_store()
    thread = threading.Thread(target=server.run, name="forumhub-http", daemon=True)
    thread.start()
    click.echo(f"Server is running on http://{config.host}:{config.port}")
    try:
        CommandShell(store).run()
    finally:
        server.should_exit = True
        thread.join(timeout=5)


if __name__ == "__main__":
    main()
