from ftkit.llist import Node, iter_nodes, lst_add, lst_del, lst_iter, lst_map, lst_new


def _build(values):
    head = None
    for value in values:
        head = lst_add(head, lst_new(value))
    return head


def _contents(head):
    return [node.content for node in iter_nodes(head)]


def test_lst_new_holds_content_unlinked():
    node = lst_new("abc")
    assert node.content == "abc"
    assert node.next is None
    assert lst_new(None).content is None


def test_lst_add_prepends():
    values = [1, 2, 3, 4]
    head = _build(values)
    assert _contents(head) == list(reversed(values))


def test_lst_add_ignores_missing_node():
    head = _build(["a"])
    assert lst_add(head, None) is head


def test_iter_nodes_empty():
    assert list(iter_nodes(None)) == []


def test_lst_iter_visits_in_order():
    values = ["x", "y", "z"]
    head = _build(values)
    seen = []
    lst_iter(head, lambda node: seen.append(node.content))
    assert seen == list(reversed(values))


def test_lst_iter_can_modify_nodes():
    head = _build([1, 2, 3])

    def bump(node):
        node.content += 10

    lst_iter(head, bump)
    assert _contents(head) == [13, 12, 11]


def test_lst_map_builds_new_list():
    values = [5, 6, 7]
    head = _build(values)
    mapped = lst_map(head, lambda node: lst_new(node.content * 2))
    assert _contents(mapped) == [v * 2 for v in reversed(values)]
    assert _contents(head) == list(reversed(values))
    assert all(a is not b for a, b in zip(iter_nodes(head), iter_nodes(mapped)))


def test_lst_map_without_input():
    assert lst_map(None, lambda node: lst_new(node.content)) is None
    assert lst_map(_build([1]), None) is None


def test_lst_del_passes_every_content():
    values = ["p", "q", "r"]
    head = _build(values)
    deleted = []
    assert lst_del(head, deleted.append) is None
    assert deleted == list(reversed(values))
    assert head.next is None


def test_lst_del_without_function_keeps_list():
    head = _build([1, 2])
    assert lst_del(head, None) is head
    assert _contents(head) == [2, 1]


def test_node_links_manually():
    tail = Node("b")
    head = Node("a", tail)
    assert _contents(head) == ["a", "b"]