"""
Rebuild-index command: recompute the tag frequency index for a collection.
"""

from __future__ import annotations

import argparse

from taggable.interfaces.cli.ui import COLOR_SUCCESS, InfoPanel, print_error, print_warning, show_spinner
from taggable.services.cli_bootstrap_svc import get_taggable_service


def cmd_rebuild_index(args: argparse.Namespace) -> int:
    """
    Rebuild the tags index of one collection from all of its documents.
    """
    try:
        service = get_taggable_service(args.collection)

        written = show_spinner(
            f"Rebuilding tags index for {args.collection}...",
            service.rebuild_tags_index,
        )

        if written is None:
            print_warning(f"Indexing is disabled for {args.collection}; index left unchanged")
            return 0

        content = f"""[bold]Collection:[/bold] {service.config.collection_name}
[bold]Index:[/bold] {service.config.tags_index_collection_name}
[bold]Entries Written:[/bold] {written}"""
        InfoPanel.show("Rebuild Complete", content, COLOR_SUCCESS)
        return 0
    except Exception as e:
        print_error(f"Error rebuilding tags index: {e}")
        return 1
