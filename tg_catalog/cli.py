from __future__ import annotations

import argparse
import contextlib
import json
import sys
from typing import Iterator, Sequence

from .catalog import CatalogCache, catalog_stats
from .catalog_filter import Category, filter_posts
from .config import config_sha256, load_config
from .config_schema import AppConfig
from .display import display_title, format_date_label, photo_path
from .errors import ConfigError, ExportError
from .export import ChannelExport, load_export
from .post import Post
from .run_log import RunLogger


def _add_common_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--export",
        required=True,
        help="Path to the channel export (result.json).",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to YAML config file (defaults are used when omitted).",
    )
    parser.add_argument(
        "--log",
        default=None,
        help="Write a JSONL run log to this path.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Include per-message events in the run log.",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="tg_catalog")

    subparsers = parser.add_subparsers(dest="command", required=True)

    lst = subparsers.add_parser(
        "list",
        help="List posts, optionally filtered by category and search query.",
    )
    _add_common_args(lst)
    lst.add_argument(
        "--category",
        choices=[c.value for c in Category],
        default=None,
        help="Show reviews, notes or all posts (config default when omitted).",
    )
    lst.add_argument(
        "--query",
        default="",
        help="Case-insensitive substring to search for in post text.",
    )
    lst.add_argument(
        "--json",
        action="store_true",
        help="Print one JSON object per post instead of summary lines.",
    )
    lst.set_defaults(_handler=_cmd_list)

    stats = subparsers.add_parser(
        "stats",
        help="Print review/note counts and the most used tags.",
    )
    _add_common_args(stats)
    stats.set_defaults(_handler=_cmd_stats)

    show = subparsers.add_parser(
        "show",
        help="Print a single post as it would be displayed.",
    )
    _add_common_args(show)
    show.add_argument(
        "--id",
        type=int,
        required=True,
        help="Message id of the post.",
    )
    show.set_defaults(_handler=_cmd_show)

    return parser


def _eprint(message: str) -> None:
    print(message, file=sys.stderr)


@contextlib.contextmanager
def _maybe_logger(args: argparse.Namespace) -> Iterator[RunLogger | None]:
    path = getattr(args, "log", None)
    if not path:
        yield None
        return

    with RunLogger.open(path, overwrite=True, verbose=bool(args.verbose)) as log:
        log.info("command_started", command=args.command, export_path=str(args.export))
        try:
            yield log
        except Exception as e:
            log.exception("command_failed", exc=e, command=args.command)
            raise
        log.info("command_completed", command=args.command)


def _load_inputs(
    args: argparse.Namespace, log: RunLogger | None
) -> tuple[AppConfig, ChannelExport, tuple[Post, ...]]:
    cfg = load_config(args.config)
    export = load_export(args.export)

    if log is not None:
        log.info(
            "inputs_loaded",
            config_path=args.config,
            config_sha256=config_sha256(cfg),
            export_sha256=export.sha256,
            messages=len(export.messages),
        )

    cache = CatalogCache(review_tags=cfg.classification.review_tag_set())
    return cfg, export, cache.posts(export, logger=log)


def _summary_line(post: Post, cfg: AppConfig) -> str:
    kind = "review" if post.is_review else "note"
    stars = "⭐" * post.rating
    tags = " ".join(f"#{t}" for t in post.tags)
    parts = [
        f"#{post.id}",
        format_date_label(post.date, cfg.display),
        kind,
        display_title(post, cfg.display),
    ]
    if stars:
        parts.append(stars)
    if tags:
        parts.append(tags)
    return " | ".join(parts)


def _cmd_list(args: argparse.Namespace) -> int:
    with _maybe_logger(args) as log:
        cfg, _, posts = _load_inputs(args, log)
        category = args.category or cfg.catalog.default_category

        visible = filter_posts(posts, category, args.query)

        if log is not None:
            log.info(
                "posts_filtered",
                category=category,
                query=args.query,
                visible=len(visible),
                total=len(posts),
            )

        for post in visible:
            if args.json:
                print(json.dumps(post.to_dict(), ensure_ascii=False, sort_keys=True))
            else:
                print(_summary_line(post, cfg))

    return 0


def _cmd_stats(args: argparse.Namespace) -> int:
    with _maybe_logger(args) as log:
        cfg, export, posts = _load_inputs(args, log)
        stats = catalog_stats(posts, top_n=cfg.catalog.top_tags)

        if export.name:
            print(f"channel={export.name}")
        print(f"messages={len(export.messages)}")
        print(f"posts={stats.total}")
        print(f"reviews={stats.reviews}")
        print(f"notes={stats.notes}")
        print(f"rated={stats.rated}")
        print(f"titled={stats.titled}")
        print(f"with_photo={stats.with_photo}")
        print("top_tags=")
        for tag, count in stats.top_tags:
            print(f"  {tag}\t{count}")

    return 0


def _cmd_show(args: argparse.Namespace) -> int:
    with _maybe_logger(args) as log:
        cfg, _, posts = _load_inputs(args, log)

        post = next((p for p in posts if p.id == args.id), None)
        if post is None:
            _eprint(f"No post with id {args.id}")
            return 4

        print(f"title={display_title(post, cfg.display)}")
        print(f"date={format_date_label(post.date, cfg.display)}")
        print(f"category={'review' if post.is_review else 'note'}")
        print(f"rating={post.rating}")
        print(f"tags={','.join(post.tags)}")
        photo = photo_path(post, cfg.display)
        if photo:
            print(f"photo={photo}")
        print("text=")
        print("".join(node.text for node in post.content))

    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)

    try:
        handler = getattr(args, "_handler")
        return int(handler(args))
    except ConfigError as e:
        _eprint(str(e))
        return 2
    except ExportError as e:
        _eprint(str(e))
        return 3
    except KeyboardInterrupt:
        _eprint("Interrupted")
        return 130
    except Exception as e:
        _eprint(f"Unexpected error: {e}")
        return 1
