#!/usr/bin/env python3
"""
Create the fowl lifecycle reference documents:
1. Growth curve workbook (expected weights and stage envelopes)
2. Cock growth timeline
3. Hen growth timeline
"""

import logging
import os
import sys

from fowl_lifecycle.reports import build_growth_workbook, build_timeline_document

OUTPUT_DIR = sys.argv[1] if len(sys.argv) > 1 else "reference_output"


# ============================================================================
# MAIN
# ============================================================================
if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    os.makedirs(OUTPUT_DIR, exist_ok=True)

    print("Creating fowl lifecycle reference documents...\n")

    print("=" * 60)
    print("Document 1: Growth Curve Workbook")
    print("=" * 60)
    build_growth_workbook(os.path.join(OUTPUT_DIR, 'Aseel_Growth_Curve.xlsx'))

    print("\n" + "=" * 60)
    print("Document 2: Cock Growth Timeline")
    print("=" * 60)
    build_timeline_document(os.path.join(OUTPUT_DIR, 'Aseel_Cock_Timeline.docx'), is_male=True)

    print("\n" + "=" * 60)
    print("Document 3: Hen Growth Timeline")
    print("=" * 60)
    build_timeline_document(os.path.join(OUTPUT_DIR, 'Aseel_Hen_Timeline.docx'), is_male=False)

    print("\n" + "=" * 60)
    print("ALL DOCUMENTS CREATED SUCCESSFULLY!")
    print("=" * 60)
    print(f"\nOutput directory: {OUTPUT_DIR}")
