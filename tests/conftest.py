import pytest

# Stanford-course style sample whose top-5 SCC sizes are 3,3,3,0,0.
THREE_TRIANGLES = """\
7 1
4 7
1 4
9 7
9 3
3 6
6 9
8 6
2 8
5 2
8 5
"""


@pytest.fixture
def edge_file(tmp_path):
    def write(text, name="edges.txt"):
        path = tmp_path / name
        path.write_text(text)
        return path

    return write


@pytest.fixture
def three_triangles(edge_file):
    return edge_file(THREE_TRIANGLES)
