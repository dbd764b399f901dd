"""
Find command: list documents matching a tag set.
"""

from __future__ import annotations

import argparse
import contextlib

from taggable.helpers.locale_helper import use_locale
from taggable.interfaces.cli.ui import TableDisplay, print_error, print_info
from taggable.services.cli_bootstrap_svc import get_taggable_service


def cmd_find(args: argparse.Namespace) -> int:
    """
    Find documents tagged with any (default) or all of the given tags.
    """
    try:
        service = get_taggable_service(args.collection)

        with use_locale(args.locale) if args.locale else contextlib.nullcontext():
            if args.match == "all":
                query = service.tagged_with_all(args.tags)
            else:
                query = service.tagged_with_any(args.tags)
            documents = service.find(query, limit=args.limit)

        if not documents:
            print_info("No matching documents")
            return 0

        TableDisplay.show_documents(documents, service.collection_cls.field_name, title=f"{len(documents)} match(es)")
        return 0
    except Exception as e:
        print_error(f"Error finding documents: {e}")
        return 1
