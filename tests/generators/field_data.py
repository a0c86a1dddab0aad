import hypothesis.strategies as st


def field_text(excluded="\t\n", min_size=0):
    return st.text(
        alphabet=st.characters(
            exclude_characters=excluded, exclude_categories=("Cs",)
        ),
        min_size=min_size,
        max_size=10,
    )


def rows(delimiter="\t", min_fields=1, max_fields=8):
    return st.lists(
        field_text(excluded=delimiter + "\n"),
        min_size=min_fields,
        max_size=max_fields,
    )


@st.composite
def delimited_text(draw, delimiter="\t", max_rows=5):
    """
    Generates (text, rows) where text is rows joined with delimiter
    and terminated by newlines.
    """
    drawn_rows = draw(st.lists(rows(delimiter), min_size=1, max_size=max_rows))
    text = "".join(delimiter.join(row) + "\n" for row in drawn_rows)
    return text, drawn_rows


@st.composite
def field_groups(draw, delimiter="\t", terminator="\n", max_fields=6):
    """
    Generates a list of non-empty fields that contain neither the
    delimiter nor the terminator.
    """
    return draw(
        st.lists(
            field_text(excluded=delimiter + terminator, min_size=1),
            min_size=1,
            max_size=max_fields,
        )
    )
