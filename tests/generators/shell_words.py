import hypothesis.strategies as st

# Characters which have a meaning to the scanner, mixed with
# plain and non-ascii characters.
special_characters = [" ", "\t", "\n", "'", '"', "\\", "$", "`"]
plain_characters = ["a", "b", "-", "*", "é", "σ", "😀"]

shell_lines = st.text(
    alphabet=st.sampled_from(special_characters + plain_characters), max_size=40
)

separators = st.lists(
    st.sampled_from([" ", "\t", "\n", "\\\n"]), min_size=1, max_size=5
).map("".join)

words = st.text(alphabet=st.characters(exclude_characters="\0"))

word_lists = st.lists(words, max_size=10)


@st.composite
def single_quoted(draw):
    content = draw(st.text().filter(lambda s: "'" not in s))
    return content, "'" + content + "'"
