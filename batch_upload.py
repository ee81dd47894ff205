#!/usr/bin/env python3
"""
Batch upload invoice/receipt images to the OCR API and print the extracted fields.

Usage:
    python batch_upload.py --folder ./facturas --strategy both
"""
import argparse
import mimetypes
import time
from pathlib import Path

import requests

# Configuration
API_BASE_URL = "http://127.0.0.1:8000"
IMAGE_SUFFIXES = {".jpg", ".jpeg", ".png", ".tif", ".tiff", ".bmp", ".webp", ".gif"}


def find_images(folder: Path) -> list[Path]:
    return sorted(p for p in folder.iterdir() if p.is_file() and p.suffix.lower() in IMAGE_SUFFIXES)


def upload_image(file_path: Path, base_url: str = API_BASE_URL, strategy: str = "regex", session=requests):
    """Upload one image and show the extraction result"""
    url = f"{base_url}/api/ocr"
    content_type = mimetypes.guess_type(file_path.name)[0] or "application/octet-stream"

    with open(file_path, "rb") as f:
        files = {"image": (file_path.name, f, content_type)}
        response = session.post(url, files=files, data={"strategy": strategy}, timeout=120)

    if response.status_code != 200:
        print(f"❌ ERROR {file_path.name}: {response.status_code} - {response.text}")
        return None

    data = response.json()
    record = data.get("extraido")
    if record:
        print(
            f"✅ {file_path.name}: fecha={record.get('date')} importe={record.get('amount')} "
            f"empresa={record.get('vendor')} (confidence: {record.get('confidence', 0):.0%})"
        )
    ai = data.get("ia")
    if ai:
        answer = ai.get("text") or ai.get("error") or ai.get("status")
        print(f"🤖 {file_path.name}: {answer}")
    return data


def main():
    parser = argparse.ArgumentParser(description="Batch OCR upload")
    parser.add_argument("--folder", required=True, help="Folder with invoice images")
    parser.add_argument("--api", default=API_BASE_URL, help="API base URL")
    parser.add_argument("--strategy", default="regex", choices=["regex", "ai", "both"])
    parser.add_argument("--delay", type=float, default=0.5, help="Seconds between uploads")
    args = parser.parse_args()

    folder = Path(args.folder)
    if not folder.is_dir():
        print(f"⚠️  Folder not found: {folder}")
        return

    images = find_images(folder)
    print("=" * 70)
    print(f"Uploading {len(images)} images to {args.api} (strategy={args.strategy})")
    print("=" * 70)

    results = []
    for image in images:
        data = upload_image(image, base_url=args.api, strategy=args.strategy)
        if data:
            results.append(data)
        time.sleep(args.delay)

    print("-" * 70)
    print(f"Done: {len(results)}/{len(images)} processed")


if __name__ == "__main__":
    main()
