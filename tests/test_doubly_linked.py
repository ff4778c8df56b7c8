from unittest import mock

from socialstructs.doubly_linked import DoublyLinkedList
from socialstructs.records import Post, Request


def _posts():
    return [
        Post("a@example.com", "first", "2024-01-01", "10:00"),
        Post("b@example.com", "second", "2024-01-02", "11:00"),
        Post("a@example.com", "third", "2024-01-03", "12:00"),
    ]


def _filled():
    lst = DoublyLinkedList()
    for post in _posts():
        lst.insert(post)
    return lst


def test_empty_list():
    lst = DoublyLinkedList()
    assert lst.is_empty()
    assert lst.posts() == []
    assert len(lst) == 0


def test_insert_keeps_order():
    lst = _filled()
    assert not lst.is_empty()
    assert [p.content for p in lst.posts()] == ["first", "second", "third"]


def test_clear():
    lst = _filled()
    lst.clear()
    assert lst.is_empty()
    assert lst.preorder() == []


def test_remove_middle_head_and_tail():
    lst = _filled()
    lst.remove("second")
    assert [p.content for p in lst] == ["first", "third"]
    lst.remove("first")
    assert [p.content for p in lst] == ["third"]
    lst.remove("third")
    assert lst.is_empty()
    lst.insert(_posts()[0])
    assert [p.content for p in lst] == ["first"]


def test_remove_missing_is_noop():
    lst = _filled()
    lst.remove("absent")
    assert len(lst) == 3


def test_remove_tail_then_append():
    lst = _filled()
    lst.remove("third")
    lst.insert(Post("c@example.com", "fourth", "2024-01-04", "13:00"))
    assert [p.content for p in lst.postorder()] == ["fourth", "second", "first"]


def test_contents_for_email():
    lst = _filled()
    assert lst.contents_for("a@example.com") == ["first", "third"]
    assert lst.contents_for("z@example.com") == []


def test_find():
    lst = _filled()
    found = lst.find("second")
    assert found.email == "b@example.com"
    assert lst.find("nothing") is None


def test_traversals():
    lst = _filled()
    forward = lst.posts()
    assert lst.preorder() == forward
    assert lst.inorder() == forward
    assert lst.postorder() == list(reversed(forward))


def test_listing_skips_first_field():
    lst = DoublyLinkedList()
    request = Request("s@example.com", "r@example.com", "2024-01-01", "12:00")
    lst.insert(request)
    lines = lst.listing().splitlines()
    assert lines[0] == "1. " + " || ".join(request.parts()[1:])
    assert lines[-1] == "Fin de las publicaciones!"


def test_emails_are_first_parts():
    lst = DoublyLinkedList()
    requests = [
        Request("s1@example.com", "r@example.com", "d", "h"),
        Request("s2@example.com", "r@example.com", "d", "h"),
    ]
    for request in requests:
        lst.insert(request)
    assert lst.emails() == ["s1@example.com", "s2@example.com"]


def test_to_dot_structure():
    lst = _filled()
    lines = lst.to_dot().splitlines()
    assert lines[:3] == ["digraph G {", "node [shape=record];", "rankdir=LR;"]
    assert lines[-1] == "}"
    assert f'node0 [label="{{{_posts()[0]}}}"];' in lines
    assert "node0 -> node1;" in lines
    assert "node1 -> node0;" in lines
    assert "node2 -> node3;" not in lines


def test_write_dot(tmp_path):
    lst = _filled()
    path = tmp_path / "list.dot"
    lst.write_dot(str(path))
    assert path.read_text(encoding="utf-8") == lst.to_dot()


@mock.patch("subprocess.run")
def test_render_graphviz(run):
    lst = _filled()
    result = lst.render_graphviz("in.dot", "out.png")
    assert result == "out.png"
    args = run.call_args[0][0]
    assert args == ["dot", "-Tpng", "in.dot", "-o", "out.png"]