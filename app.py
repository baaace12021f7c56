# app.py
import logging

import streamlit as st

from algorithms.kmp import kmp_build_lps, kmp_match_spans
from utils.highlight import highlight_matches_html
from utils.logging_config import setup_logging
from utils.text_io import read_files_as_texts

setup_logging()
logger = logging.getLogger("app")

st.set_page_config(page_title="KMP Search", layout="wide")
st.title("KMP substring search")

uploads = st.file_uploader("Text files (optional)", type=["txt"], accept_multiple_files=True)
typed = st.text_area("Text", height=200)
pattern = st.text_input("Pattern")

texts, names = read_files_as_texts(uploads)
if typed:
    texts.insert(0, typed)
    names.insert(0, "typed text")

if st.button("Search"):
    if not pattern:
        st.warning("Enter a non-empty pattern; the empty pattern matches nowhere.")
    elif not texts:
        st.warning("Type some text or upload a file.")
    else:
        st.subheader("Failure function")
        st.table({"symbol": list(pattern), "lps": kmp_build_lps(pattern)})
        for name, text in zip(names, texts):
            spans = kmp_match_spans(text, pattern)
            matches = [s for s, _ in spans]
            logger.info("%s: %d matches", name, len(matches))
            st.subheader(f"{name}: {len(matches)} match(es)")
            if matches:
                st.write("Positions:", matches)
            st.markdown(
                highlight_matches_html(text, spans),
                unsafe_allow_html=True,
            )

# Run with: streamlit run app.py
