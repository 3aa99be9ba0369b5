#!/usr/bin/env python3
"""
Teacher-facing viewer for score files.

Upload (or paste) a file of ``name`` / ``name:score`` lines and see the
per-person totals as a table together with the plain-text summary printed by
``tally_scores.py``.

Run locally:
    python3 -m venv .venv
    source .venv/bin/activate
    pip install -e .
    streamlit run streamlit_app.py
"""

from typing import Optional

import streamlit as st

from score_records import FileReadError, MalformedScore, decode_contents, parse_contents
from score_summary import aggregate, summary_frame, summary_lines

# --- Page Configuration ---
st.set_page_config(page_title="Score Tally", layout="wide")


def display_header():
    st.title("Score Tally")
    st.caption("One line per test: `name` for a missed test, `name:score` for a completed one.")


# --- Input ---
def read_input() -> Optional[str]:
    """Returns the uploaded file's text, falling back to the pasted text."""
    uploaded = st.file_uploader("Score file", type=["txt"])
    pasted = st.text_area("...or paste scores here", key="pasted_scores")

    if uploaded is not None:
        try:
            return decode_contents(uploaded.getvalue(), uploaded.name)
        except FileReadError as exc:
            st.error(str(exc))
            return None
    if pasted:
        return pasted
    return None


# --- Summary ---
def display_summary(contents: str):
    """Parses ``contents`` and renders the table and text summary."""
    try:
        records = parse_contents(contents)
    except MalformedScore as exc:
        st.error(str(exc))
        return

    stats = aggregate(records)
    st.subheader("Totals")
    st.dataframe(summary_frame(stats), hide_index=True)

    st.subheader("Summary")
    st.code("\n".join(summary_lines(stats)), language=None)


# --- Main Application ---
def main():
    display_header()
    contents = read_input()
    if contents is None:
        st.info("Upload a score file or paste scores to see the summary.")
        return
    display_summary(contents)


if __name__ == "__main__":
    main()
