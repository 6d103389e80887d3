#!/usr/bin/env python3
"""
Box View client usage examples.

Uploads a document by URL, renames it, lists the account's documents,
opens a viewing session and finally deletes the document again.

Set BOX_VIEW_API_KEY (or add it to a .env file) before running.
"""

import sys

from box_view import BoxViewClient, BoxViewError, Document


def manage_documents(box: BoxViewClient) -> None:
    """Upload, rename, list and delete a document."""
    print("=== Managing documents ===")

    doc = Document(
        name="test document",
        file_url="https://www.example.com/sample.pdf",
    )
    box.upload(doc)
    print(f"✓ Uploaded {doc.id} ({doc.status})")

    doc.name = "new test document"
    box.update(doc)
    print(f"✓ Renamed to {doc.name}")

    for document_id, listed in box.load({"limit": 10}).items():
        print(f"  {document_id}: {listed.name} [{listed.status}]")

    box.delete(doc)
    print("✓ Deleted, document id is now", doc.id)


def view_document(box: BoxViewClient, document_id: str) -> None:
    """Create a session and print an iframe for it."""
    print("\n=== Viewing a document ===")

    doc = Document(id=document_id)
    box.view(doc, {"duration": 30})
    print(f'<iframe src="{doc.session.url}"></iframe>')


def main() -> int:
    try:
        with BoxViewClient.from_settings() as box:
            manage_documents(box)
            if len(sys.argv) > 1:
                view_document(box, sys.argv[1])
    except BoxViewError as e:
        print(f"❌ Box View request failed: {e} (status={e.status_code})")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
