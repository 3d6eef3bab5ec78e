import logging

import streamlit as st
import pandas as pd
import numpy as np
import plotly.express as px

from components.bench import BenchConfig, run_benchmark, summarize
from components.workload import WorkLoad
from tries.lowercase_trie import InvalidWordError, Trie

logging.basicConfig(
    level=logging.INFO,
    format="[%(levelname)s] %(message)s",
)
log = logging.getLogger("trie_bench")

# Configure page
st.set_page_config(
    page_title="Trie Bench",
    page_icon="🌳",
    layout="wide",
    initial_sidebar_state="expanded"
)

if 'trie' not in st.session_state:
    st.session_state['trie'] = Trie()

# Main title
st.title("🌳 Lowercase Trie Bench")
st.markdown("---")

# Sidebar
with st.sidebar:
    st.header("Navigation")
    page = st.selectbox(
        "Choose a section:",
        ["Home", "Playground", "Workload", "Benchmark"]
    )

    st.markdown("---")
    st.subheader("Quick Actions")
    if st.button("🔄 Reset Trie"):
        st.session_state['trie'] = Trie()
        st.session_state.pop('bench', None)
        st.rerun()

trie = st.session_state['trie']

# Main content area
if page == "Home":
    st.header("Welcome to the Trie Bench")

    st.markdown("""
    A prefix trie over the letters **a-z**, with a playground and a benchmark:

    **Key Features:**
    - ✍️ Insert words and check membership
    - 🔤 List every stored word in sorted order
    - 🎲 Generate random or prefix-clustered workloads
    - ⏱️ Time insert / contains / enumeration across workload sizes
    """)

    col1, col2, col3 = st.columns(3)

    with col1:
        st.metric("Stored Words", f"{len(trie):,}")

    with col2:
        st.metric("Nodes", f"{trie.count_nodes():,}")

    with col3:
        st.metric("Avg Branch Factor", f"{trie.count_nodes(get_avg_branch_factor=True):.2f}")

elif page == "Playground":
    st.header("✍️ Playground")

    col1, col2 = st.columns(2)

    with col1:
        st.subheader("Insert")
        raw = st.text_area("Words (whitespace separated)", help="Lowercase letters a-z only")
        if st.button("Insert"):
            batch = raw.split()
            bad = [w for w in batch if not Trie.is_lowercase(w)]
            if bad:
                st.error(f"❌ Not lowercase a-z: {', '.join(bad)}")
            else:
                try:
                    trie.batch_insert(batch)
                    st.success(f"✅ Inserted {len(set(batch))} word(s)")
                except InvalidWordError as e:
                    st.error(f"❌ {e}")

    with col2:
        st.subheader("Membership")
        probe = st.text_input("Word to look up")
        if probe:
            try:
                if trie.contains(probe):
                    st.success(f"✅ '{probe}' is stored")
                else:
                    st.info(f"'{probe}' is not stored")
            except InvalidWordError as e:
                st.error(f"❌ {e}")

    st.subheader("Stored Words")
    words = trie.words()
    if words:
        st.dataframe(pd.DataFrame({'word': words}), use_container_width=True)
    else:
        st.info("👆 The trie is empty, insert some words to begin")

elif page == "Workload":
    st.header("🎲 Workload Preview")

    col1, col2, col3 = st.columns(3)
    with col1:
        num_words = st.number_input("Words", min_value=1, max_value=100_000, value=1_000, step=100)
    with col2:
        p_freq = st.slider("Prefix frequency", min_value=0.0, max_value=1.0, value=0.0, step=0.05)
    with col3:
        seed = st.number_input("Seed", min_value=0, value=42, step=1)

    source = st.radio("Source", ["Synthetic", "Faker"], horizontal=True)

    try:
        wl = WorkLoad(int(seed))
        if source == "Synthetic":
            sample = wl.words(int(num_words), p_freq=p_freq)
        else:
            sample = wl.natural_words(int(num_words))
    except ValueError as e:
        st.error(f"❌ {e}")
        sample = []

    if sample:
        df = pd.DataFrame({'word': sample})
        df['prefix'] = df['word'].str[:2]
        df['length'] = df['word'].str.len()

        st.write(f"**Distinct words:** {df['word'].nunique():,} / {len(df):,}")
        st.dataframe(df.head(50))

        counts = df['prefix'].value_counts().head(30)
        fig = px.bar(
            x=counts.index,
            y=counts.values,
            title="Most Common Two-Letter Prefixes"
        )
        fig.update_layout(xaxis_title="Prefix", yaxis_title="Words")
        st.plotly_chart(fig, use_container_width=True)

        fig_len = px.histogram(df, x='length', title="Word Length Distribution")
        st.plotly_chart(fig_len, use_container_width=True)

        if st.button("📥 Load into Trie"):
            trie.batch_insert(sample)
            st.success(f"✅ Trie now holds {len(trie):,} words")

elif page == "Benchmark":
    st.header("⏱️ Benchmark")

    with st.expander("Configure", expanded=True):
        sizes = st.multiselect(
            "Workload sizes",
            [1_000, 5_000, 10_000, 25_000, 50_000, 100_000],
            default=[1_000, 5_000, 10_000]
        )
        p_freq = st.slider("Prefix frequency", min_value=0.0, max_value=1.0, value=0.0, step=0.05)
        repeats = st.number_input("Repeats", min_value=1, max_value=20, value=3)
        seed = st.number_input("Seed", min_value=0, value=1337, step=1)
        unique = st.checkbox("Unique words", value=False)

    if st.button("▶️ Run Benchmark"):
        try:
            config = BenchConfig(
                sizes=tuple(sorted(sizes)),
                p_freq=p_freq,
                repeats=int(repeats),
                seed=int(seed),
                unique=unique,
            )
            with st.spinner("Running..."):
                st.session_state['bench'] = run_benchmark(config)
        except ValueError as e:
            st.error(f"❌ {e}")

    if 'bench' in st.session_state:
        df = st.session_state['bench']

        tab1, tab2, tab3 = st.tabs(["Timings", "Throughput", "Raw Data"])

        with tab1:
            fig = px.line(df, x='n_words', y='seconds', color='operation', markers=True,
                          title="Median Time by Workload Size")
            st.plotly_chart(fig, use_container_width=True)
            st.dataframe(summarize(df))

        with tab2:
            finite = df[np.isfinite(df['ops_per_sec'])]
            fig_ops = px.bar(finite, x='operation', y='ops_per_sec', color='n_words', barmode='group',
                             title="Operations per Second")
            st.plotly_chart(fig_ops, use_container_width=True)

            shape = df.drop_duplicates('n_words')[['n_words', 'nodes', 'avg_branch_factor']]
            st.write("**Trie Shape:**")
            st.dataframe(shape)

        with tab3:
            st.dataframe(df, use_container_width=True)
    else:
        st.info("👆 Configure and run a benchmark to see results")

# Footer
st.markdown("---")
st.markdown(
    """
    <div style='text-align: center; color: #B0B0B0; padding: 1rem;'>
        Built with Streamlit 🚀 | Lowercase Trie Bench
    </div>
    """,
    unsafe_allow_html=True
)
