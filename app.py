import streamlit as st
import pandas as pd
import numpy as np
import plotly.express as px

from components.work_loads import WorkLoad
from concat_words.config import STRICT_WORDS, configure_logging
from concat_words.errors import InvalidWordError
from concat_words.finder import ConcatWordFinder
from concat_words.wordlist import decode_lines, iter_words

configure_logging()

# Configure page
st.set_page_config(
    page_title="Concatenated Words",
    page_icon="🔤",
    layout="wide",
    initial_sidebar_state="expanded"
)


def run_finder(words):
    """Build the dictionary, verify it, and keep everything the results page needs."""
    finder = ConcatWordFinder()
    finder.add_all(words)
    report = finder.finish()
    rows = [
        {"Word": w, "Length": len(w), "Split": " + ".join(finder.segment(w) or [])}
        for w in report.confirmed
    ]
    st.session_state['report'] = report
    st.session_state['table'] = pd.DataFrame(rows, columns=["Word", "Length", "Split"])


# Main title
st.title("🔤 Concatenated Word Finder")
st.markdown("---")

# Sidebar
with st.sidebar:
    st.header("Navigation")
    page = st.selectbox(
        "Choose a section:",
        ["Upload Word List", "Demo Workload", "Results"]
    )

    st.markdown("---")
    strict = st.checkbox("Reject invalid lines", value=STRICT_WORDS,
                         help="Stop on the first line that is not a lowercase a-z word")

if page == "Upload Word List":
    st.header("📁 Upload Word List")
    st.markdown("One lowercase word per line. Blank lines are ignored.")

    uploaded_file = st.file_uploader("Choose a word list", type=['txt'])

    if uploaded_file is not None:
        try:
            words = list(iter_words(decode_lines(uploaded_file.getvalue()), strict=strict))
        except InvalidWordError as e:
            st.error(f"❌ {e}")
        except UnicodeDecodeError as e:
            st.error(f"❌ Error reading file: {e}")
        else:
            run_finder(words)
            st.success(f"✅ Processed {len(words)} words. Open 'Results' to see them.")
    else:
        st.info("👆 Please upload a word list to begin")

elif page == "Demo Workload":
    st.header("🎲 Demo Workload")

    col1, col2, col3 = st.columns(3)
    with col1:
        num_words = st.number_input("Words", min_value=0, max_value=200_000, value=5_000, step=500)
    with col2:
        concat_freq = st.slider("Planted concatenations", min_value=0.0, max_value=0.9, value=0.3)
    with col3:
        seed = st.number_input("Seed", min_value=0, value=42)

    if st.button("Generate and run"):
        words = WorkLoad(seed=int(seed)).words(int(num_words), concat_freq=concat_freq)
        run_finder(words)
        st.success(f"✅ Generated and processed {len(words)} words. Open 'Results' to see them.")

elif page == "Results":
    st.header("📊 Results")

    if 'report' in st.session_state:
        report = st.session_state['report']
        df = st.session_state['table']

        col1, col2, col3, col4 = st.columns(4)
        with col1:
            st.metric("Longest", report.longest or "none found")
        with col2:
            st.metric("2nd Longest", report.second_longest or "none found")
        with col3:
            st.metric("Concatenated Words", report.total_count)
        with col4:
            st.metric("Dictionary Size", report.dictionary_size,
                      f"{report.node_count} trie nodes, branching {report.avg_branch_factor:.2f}",
                      delta_color="off")

        st.code(str(report), language=None)

        if len(df) > 0:
            lengths = df["Length"].to_numpy()
            st.subheader("Length Statistics")
            st.write(f"- Mean length: {np.mean(lengths):.2f}")
            st.write(f"- Median length: {np.median(lengths):.1f}")
            st.write(f"- 90th percentile: {np.percentile(lengths, 90):.1f}")

            fig = px.histogram(df, x="Length", title="Confirmed word lengths")
            st.plotly_chart(fig, use_container_width=True)

            st.subheader("Confirmed Words")
            st.dataframe(df.sort_values("Length", ascending=False), use_container_width=True)
        else:
            st.success("No concatenated words in this list.")
    else:
        st.info("📁 Upload a word list or generate a demo workload first")

# Footer
st.markdown("---")
st.markdown(
    """
    <div style='text-align: center; color: #B0B0B0; padding: 1rem;'>
        Built with Streamlit 🚀 | Concatenated Word Finder
    </div>
    """,
    unsafe_allow_html=True
)
