# hawkeyedit

`hawkeyedit` keeps a graph of render-pass nodes and stores it in a YAML
file. A graph is made of three kinds of node:

- **input** nodes, which hand resources into the graph through output pins;
- **output** nodes, which take resources out of the graph through input pins;
- **rasterized** nodes, which sit in between, with a number of input and
  output resources of their own.

Every node has between 1 and 20 resources on each side it has; counts
outside that range are clamped.

## Ids and pins

Each node gets a numeric id from an `IdProvider`. Ids are random multiples
of 64, so the numbers just after a node's id are free for its pins: input
pin `i` is `id + i + 1`, and output pin `i` is `id + 20 + i + 1`.

A link joins two pins. It is accepted when the two pin ids are non-zero,
different from each other, and each belongs to a node in the graph;
otherwise `ValueError` is raised. Links are numbered from 100 upwards.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## The command

```
hawkeyedit [FILE] [--add-input X Y] [--add-output X Y] [--add-rasterized X Y]
           [--connect PIN PIN] [--list]
```

- `FILE` is the graph file; it defaults to `testfile.yml` in the current
  directory. A file that does not exist yet is treated as an empty graph.
- `--add-input`, `--add-output` and `--add-rasterized` place a new node of
  that kind at `X Y`. Each may be given several times.
- `--connect PIN PIN` links two pins by their ids. It may be given several
  times; a link that is refused ends the command with status 1.
- `--list` prints every node with its type, UUID, position and pin ids.

When it is done the command writes the graph back to `FILE`. If the graph
has no nodes, nothing is written. Messages are printed with their severity
in front, for example `[Info] Linked pin ...`, `[Error] ...` or
`[Fatal] Could not load ...`. A file that cannot be read or parsed ends
the command with status 1.

## The file format

The graph is stored as a mapping with a single `nodes` list. Every entry
has its `id` as a UUID string, its `type`, and its position under `meta`:

```yaml
nodes:
- id: 00000000-0000-0000-0000-000000000040
  type: input
  resource-count: 1
  resources:
  - type: 0
    content-operation: 0
    input:
      dimensions:
        x: 0
        y: 0
        z: 0
      format: ''
    output:
      dimensions:
        x: 0
        y: 0
        z: 0
      format: ''
  meta:
    x: 10.0
    y: 10.0
- id: 00000000-0000-0000-0000-000000000080
  type: rasterized
  input:
    resource-count: 2
  output:
    resource-count: 1
  meta:
    x: 200.0
    y: 10.0
```

An `output` node has `id`, `type` and a `resources` list, without a
`resource-count`. When an input or output node is read back, the number of
entries in `resources` decides its resource count (at least one).

A resource's `type` is `0` for an image and `1` for a buffer. Its
`content-operation` is `0` for "don't care", `1` for "preserve" and `2` for
"clear". A pin's `format` is read only when its `dimensions` are present.

## Using it from Python

- `hawkeyedit.editor.Editor(path)` holds the nodes and links of one file.
  `load()` reads the nodes from the file, `save()` writes them,
  `add_input_node(x, y)`, `add_output_node(x, y)` and
  `add_rasterized_node(x, y)` place and return new nodes,
  `connect(input_pin_id, output_pin_id)` adds and returns a `Link`, and
  `disconnect(link_id)` removes one and tells whether it did. Used in a
  `with` block, the editor loads on entry and saves when the block ends
  without an exception.
- `hawkeyedit.nodes` has the node classes `InputNode`, `OutputNode` and
  `RasterizedNode`, their `Resource`, `ResourcePin` and `Dimensions` parts,
  and `create_node(kind, x, y, provider)` to build a node from its type
  name. Every node turns itself into plain data with `serialize()` and reads
  it back with `deserialize(data)`; data of the wrong type, or an unknown
  type name, raises `NodeTypeError`. `owns_input(pin_id)` and
  `owns_output(pin_id)` tell whether a pin belongs to a node.
- `hawkeyedit.ids` has `IdProvider`, which hands out fresh ids with
  `next()` (optionally seeded for repeatable ids), and
  `number_to_uuid_string` / `uuid_string_to_number` to convert between ids
  and the UUID strings used in the file.
- `hawkeyedit.cli` has `main(argv=None)`, the command above, and
  `format_message(message, severity)`, which puts the severity tag in front
  of a message.

## What it does not do

- There is no graphical editor: nodes are placed and linked from Python or
  from the command line, by coordinates and pin ids.
- Links are not stored in the graph file. They last only as long as the
  `Editor` that holds them.
- `connect` does not check that a link runs from an output pin to an input
  pin, only that both pins belong to nodes in the graph.