"""
Tags command: list indexed tags, optionally with weights.
"""

from __future__ import annotations

import argparse
import contextlib

from taggable.helpers.locale_helper import use_locale
from taggable.interfaces.cli.ui import TableDisplay, console, print_error, print_info
from taggable.services.cli_bootstrap_svc import get_taggable_service


def cmd_list_tags(args: argparse.Namespace) -> int:
    """
    Print the distinct tag list, or a ranked weight table with --weights.
    """
    try:
        service = get_taggable_service(args.collection)

        with use_locale(args.locale) if args.locale else contextlib.nullcontext():
            if args.weights:
                weights = service.tags_with_weight()
                if not weights:
                    print_info("No indexed tags")
                    return 0
                TableDisplay.show_tag_weights(weights, title=f"Tags in {args.collection}")
            else:
                tags = service.tags()
                if not tags:
                    print_info("No indexed tags")
                    return 0
                for tag in tags:
                    console.print(tag, markup=False, highlight=False)
        return 0
    except Exception as e:
        print_error(f"Error reading tags index: {e}")
        return 1
