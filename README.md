# socialstructs

Small containers and record types for a social-network style application.
The package covers users, posts, comments, friend requests and relations
between users. It provides simple linked lists, a stack, a sparse matrix and
a tiny key/value map. The linked lists can be written out as Graphviz
descriptions.

## Installing

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## Records: `socialstructs.records`

- `User(name, surname, birth_date, email, password)`
  - Compared, ordered and hashed by `email`.
  - It also compares with a plain string, which is taken as an e-mail.
  - `parts()` returns the five fields as a list.
  - `to_csv()` joins the fields with commas.
- `Comment(email="", content="", timestamp="")`
  - Compared, ordered and hashed by `timestamp`.
  - `describe()` returns a labelled description.
- `Post(email, content, date, time, comments=[])`
  - Compared, ordered and hashed by `date`.
  - `comments` is a plain list of `Comment`.
- `Request(sender, email, date, time)`
  - A friend request.
  - `parts()` returns its fields.
- `Relation(sender, receiver, status)`
  - A relation between two users.
  - `parts()` returns its fields.

`str()` of every record gives its fields separated by spaces.

## Containers

### `socialstructs.doubly_linked.DoublyLinkedList`

Items are appended at the tail with `insert`. The list supports iteration,
`len()`, `is_empty()` and `clear()`.

For items with `content` and `email` attributes, such as `Post`:

- `remove(content)` drops the first item with that content.
- `find(content)` returns the first item with that content, or `None`.
- `contents_for(email)` lists the contents written by that e-mail.

For items with a `parts()` method:

- `listing()` returns numbered lines of every item without its first field, followed by `Fin de las publicaciones!`.
- `emails()` returns the first field of every item.

The other methods:

- `preorder()`, `inorder()` and `posts()` return the items from head to tail.
- `postorder()` returns them from tail to head.
- `to_dot()` returns a Graphviz description with links in both directions.
- `write_dot(filename)` saves that description to a file.
- `render_graphviz(dot_filename, image_filename)` runs `dot -Tpng` on the file and returns the image name.

### `socialstructs.singly_linked.SinglyLinkedList`

Construct it as `SinglyLinkedList(index="")`; the label is kept in `.index`.

- `insert` appends at the tail.
- `contents()` lists the `content` of each item.
- `remove_by_date(date)` and `remove_by_email(email)` drop the first match.
- `contains_date(date)` and `contains_email(email)` test for a match.
- `to_dot()` returns a Graphviz description with forward links.
- `write_dot(filename)` and `render_graphviz(dot_filename, image_filename)` work as in the doubly linked list.

### `socialstructs.stack.Stack`

A last-in, first-out stack. Iteration runs from the top down.

- `push(item)` puts an item on top.
- `pop()` discards the top item and does nothing when the stack is empty.
- `top()` returns the top item. It raises `EmptyStackError`, a subclass of `IndexError`, when the stack is empty.
- `contains(email)` tells whether some item has that `email`.
- `remove(email)` drops the topmost item with that `email`.
- `render_top()` and `render()` return numbered lines without the first field of each item.

### `socialstructs.sparse_matrix.SparseMatrix`

Only the cells that were set are stored.

- `insert(i, j, value)` sets a cell and replaces any earlier value.
- `get(i, j, default=None)` reads a cell.
- `(i, j) in matrix` tests whether a cell is set.
- `len()` counts the set cells.
- Iteration yields `(i, j, value)` row by row.
- `width` and `height` are the largest column and row index seen.
- `column_headers()` returns the header line.
- `render()` returns the whole grid as text, with `X` for unset cells.

### `socialstructs.simple_map.SimpleMap`

An association list.

- `insert(key, value)` adds an entry.
- `get(key)` returns the most recently inserted value for the key, or `None`.
- `key in m` tests whether the key is present.
- `len()` counts every entry, including shadowed ones.
- Iteration yields keys from the newest entry to the oldest.

## Example

```python
from socialstructs.records import Post, Request
from socialstructs.doubly_linked import DoublyLinkedList
from socialstructs.stack import Stack

feed = DoublyLinkedList()
feed.insert(Post("alice@example.com", "Hello", "2024-05-01", "10:00"))
feed.insert(Post("bob@example.com", "Hi there", "2024-05-02", "11:30"))

print(feed.contents_for("alice@example.com"))  # ['Hello']
print(feed.to_dot())

inbox = Stack()
inbox.push(Request("bob@example.com", "alice@example.com", "2024-05-03", "09:00"))
print(inbox.render_top())  # 1. alice@example.com || 2024-05-03 || 09:00
```

`render_graphviz` needs the `dot` program, which must be installed
separately. The return code of `dot` is not checked.

## What it does not do

This is a library of containers only. It has the following limits:

- There is no command-line program or interactive menu.
- Nothing is stored on disk, apart from the Graphviz files you ask it to write.
- There are no tree containers for users, posts or comments.
- Users are not kept in any registry, and no logins or accounts are managed.