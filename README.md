# pointbus

Building blocks for services that exchange data points:

- `pointbus.types`: `Bool` is a boolean value. `+` gives a logical OR, `*` gives a logical AND, and `|`, `&` and `~` behave as their names suggest. `str(Bool(True))` is `"true"`. `type_of(value)` returns the qualified type name of a value, for example `"pointbus.types.Bool"` or `"int"`.
- `pointbus.subscription_criteria`: `SubscriptionCriteria(name, cot)` describes one subscription to a point.
  - `cot` is a cause-of-transmission label such as `"Inf"` or `"ReqCon"`, or an enum member, in which case its name is used.
  - `destination()` returns `"Cot:point name"`. When the cot is `"All"` it returns just the name.
  - The static method `SubscriptionCriteria.dest(cot, name)` builds the same string.
- `pointbus.subscriptions`: `Subscriptions(parent)` keeps senders keyed by receiver id.
  - It holds per-destination (multicast) senders and catch-all (broadcast) senders.
  - `iter(point_id)` yields `(receiver_id, sender)` pairs: the multicast ones for that point first, then the broadcast ones.
  - `extend_multicast`, `remove` and `remove_all` raise `SubscriptionError` when the receiver or subscription is not found.
  - `exit()` clears everything.
- `pointbus.fn_conf_options`: `FnConfOptions.from_str(text)` reads the optional `default <value>` and `status <status>` parts of a function keyword. Both are kept as strings, or `None` when absent. `hash()` returns a key identifying the set of options.
- `pointbus.fn_conf_keywd`: `FnConfKeywd.from_str(text)` parses task function keywords of the form `[input] kind [type] [data] [options]`, for example `input1 point real '/path/Point.Name' default 0.5`.
  - The kind is one of `fn`, `let`, `const` or `point`, given as `FnConfKindName`.
  - The type is given as `FnConfPointType`.
  - Input it cannot read raises `FnConfKeywdError`.

## Installation

```
pip install .
```

## Example

```python
from pointbus.fn_conf_keywd import FnConfKeywd, FnConfKindName, FnConfPointType

keywd = FnConfKeywd.from_str("input4 point bool /path/Point.Name default true")
assert keywd.kind == FnConfKindName.Point
assert keywd.input() == "input4"
assert keywd.type_() == FnConfPointType.Bool
assert keywd.data() == "/path/Point.Name"
assert keywd.value.options.default == "true"
```

```python
import queue

from pointbus.subscriptions import Subscriptions

inbox_101, inbox_102 = queue.Queue(), queue.Queue()
subscriptions = Subscriptions("App")
subscriptions.add_multicast(101, "/App/Point1", inbox_101)
subscriptions.add_broadcast(102, inbox_102)
for receiver_id, sender in subscriptions.iter("/App/Point1"):
    sender.put(f"to {receiver_id}")
```

A sender can be any object. `Subscriptions` only stores senders and hands them back. Delivering points through them is left to the caller.

## What it does not do

The package does not run services or threads. It does not read YAML configuration or define point and status types. It provides the subscription registry and the keyword parsers that such a runtime would use.

## Running the tests

```
pip install .[test]
pytest
```