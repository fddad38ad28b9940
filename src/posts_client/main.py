"""
Main Entry Point

Command-line front end for the Posts Client. Wires the layers together:

1. Build the configuration from the environment
2. Create the API client, repository and view-model
3. Observe the result cell of the requested operation
4. Trigger the call and print the outcome

Exit codes: 0 on success, 1 on an HTTP failure or transport fault,
2 on invalid arguments, 130 when interrupted.
"""

import argparse
import asyncio
import logging
import sys
from typing import List, Optional, get_args

from pydantic import ValidationError

from .api import APIClient, Failure, Post, Success, TransportError
from .config import Config, LogConfig, LogLevel
from .errors import InvalidParameterError, PostsClientError
from .live import ResultCell
from .repository import PostsRepository, Repository
from .viewmodel import PostsViewModel


def setup_logging(log_config: LogConfig, console_level: Optional[str] = None) -> logging.Logger:
    """
    Attach a stdout handler and a log-file handler to the package logger.

    Handlers left by an earlier call are closed and replaced, so calling this
    twice does not duplicate output. The file always records DEBUG and up;
    the console shows ``console_level`` (default: the configured level).
    """
    log_config.log_directory.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger("posts_client")
    logger.setLevel(logging.DEBUG)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler(sys.stdout)
    console.setLevel(console_level or log_config.log_level)
    console.setFormatter(logging.Formatter(log_config.console_format, datefmt="%H:%M:%S"))

    log_file = logging.FileHandler(log_config.log_file_path, encoding="utf-8")
    log_file.setLevel(logging.DEBUG)
    log_file.setFormatter(logging.Formatter(log_config.file_format))

    logger.addHandler(console)
    logger.addHandler(log_file)
    return logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="posts-client",
        description="Query the JSONPlaceholder posts API.",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=get_args(LogLevel),
        default=None,
        help="Console log level (default from config)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    get = sub.add_parser("get", help="Fetch the default post")
    get.add_argument("--auth", default=None, help="Value for the per-call Auth header")

    get_id = sub.add_parser("get-id", help="Fetch a post by id")
    get_id.add_argument("post_id", type=int)

    by_user = sub.add_parser("by-user", help="Fetch the posts of a user")
    by_user.add_argument("user_id", type=int)
    by_user.add_argument("--sort", default=None, help="Field to sort by (e.g. id)")
    by_user.add_argument("--order", choices=["asc", "desc"], default=None)

    create = sub.add_parser("create", help="Create a post")
    create.add_argument("--user-id", type=int, required=True)
    create.add_argument("--id", type=int, default=0, dest="post_id")
    create.add_argument("--title", required=True)
    create.add_argument("--body", required=True)
    create.add_argument("--form", action="store_true", help="Send form-encoded fields instead of JSON")

    return parser


def report(result, logger: logging.Logger) -> bool:
    """
    Print a call result.

    Returns:
        True if the call succeeded.
    """
    if isinstance(result, Success):
        posts = result.body if isinstance(result.body, list) else [result.body]
        posts = [post for post in posts if post is not None]
        logger.info(f"HTTP {result.status_code}: {len(posts)} post(s)")
        for post in posts:
            print(post.format_row())
            print()
        return True

    if isinstance(result, Failure):
        logger.error(f"Request failed with HTTP {result.status_code}")
        return False

    if isinstance(result, TransportError):
        logger.error(f"No response from server: {result.cause}")
        return False

    raise TypeError(f"Unexpected call result: {result!r}")


async def run(args: argparse.Namespace, repository: PostsRepository, logger: logging.Logger) -> int:
    """Trigger the requested call through a view-model and report it."""
    view_model = PostsViewModel(repository)
    outcomes: List[bool] = []

    def observe(cell: ResultCell) -> None:
        cell.observe(lambda result: outcomes.append(report(result, logger)))

    if args.command == "get":
        observe(view_model.post)
        view_model.get_post(auth=args.auth)
    elif args.command == "get-id":
        observe(view_model.post_by_id)
        view_model.get_post_by_id(args.post_id)
    elif args.command == "by-user":
        options = {}
        if args.sort:
            options["_sort"] = args.sort
        if args.order:
            options["_order"] = args.order
        if options:
            observe(view_model.posts_by_owner_filtered)
            view_model.get_posts_by_owner_filtered(args.user_id, options)
        else:
            observe(view_model.posts_by_owner)
            view_model.get_posts_by_owner(args.user_id)
    elif args.command == "create":
        if args.form:
            observe(view_model.created_form)
            view_model.push_post_form(args.user_id, args.post_id, args.title, args.body)
        else:
            observe(view_model.created)
            view_model.push_post(Post(
                user_id=args.user_id,
                id=args.post_id,
                title=args.title,
                body=args.body,
            ))
    else:
        raise ValueError(f"Unknown command: {args.command}")

    try:
        await view_model.join()
    finally:
        await view_model.close()

    return 0 if outcomes and all(outcomes) else 1


async def _main_async(args: argparse.Namespace, config: Config, logger: logging.Logger) -> int:
    async with APIClient(config) as api:
        return await run(args, Repository(api), logger)


def main(argv: Optional[List[str]] = None):
    """Main entry point for the posts client."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = Config.from_env()
    except ValidationError as e:
        parser.error(f"invalid configuration: {e}")

    logger = setup_logging(config.log, args.log_level)

    try:
        sys.exit(asyncio.run(_main_async(args, config, logger)))

    except InvalidParameterError as e:
        logger.error(f"Invalid argument: {e}")
        sys.exit(2)

    except PostsClientError as e:
        logger.error(f"{type(e).__name__}: {e}")
        sys.exit(1)

    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        sys.exit(130)


if __name__ == "__main__":
    main()
