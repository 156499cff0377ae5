# trackercore

Building blocks for a music tracker application, in plain Python with no
third-party dependencies.

## Modules

- `trackercore.pool` – `Pool`, an ordered collection that can be fed and
  drained from both ends, with removal of any held object by identity.
- `trackercore.locks` – `CASLock`, a non-reentrant lock with a non-blocking
  `try_lock`, usable as a context manager; `LockLevel`, the ordering of lock
  levels from `LOW` to `GUI`.
- `trackercore.events` – `EventNotifier` and `CallbackRegisterer`. Listeners
  register with a registerer; `notify` queues one `CallbackInstance` per
  listener on the notifier. The owner takes them with `next_instance`, calls
  them with `call()` and gives them back with `return_instance`. The notifier
  holds a fixed number of instances; `notify` raises `NotifierExhausted` when
  none is left. `try_again` and `new_round` hold instances back for a later
  round. `ClassIdIssuer` hands out numbers for class names.
- `trackercore.binary_file` – `BinaryFile`, reading signed and unsigned 8, 16
  and 32 bit integers in a chosen `Endianness`; a short read raises
  `EOFError`. `native_endianness()` gives the byte order of the machine.
- `trackercore.filesystem` – `FileObject`, `current_directory`,
  `list_file_objects`, `go_back` and `advance`. Directories are strings ending
  in a separator; an empty string stands for the level above the top, and
  listing it gives the drives (the root directory outside Windows).
- `trackercore.alphabet` – `glyph_for`, the `GlyphRect` of a printable ASCII
  character in the basic font sheet.
- `trackercore.input_state` – `InputState`, which turns raw "is down" key and
  mouse button state into pressed and released edges, frame by frame.
- `trackercore.threads` – `AtomicCounter`, `ThreadCounter` (counts a thread
  while its `with` block runs) and `CountedThreads`, which starts daemon
  worker threads, counts those still running, and can be closed and joined.
- `trackercore.container` – `Container`, `ContainerChange`,
  `ContainerAction` and `ContainerChangeEvent`: containers that report changes
  through a registerer.
- `trackercore.instrument` – an `Instrument` container holding `SampleData`
  mappings, reporting each add, erase and clear.
- `trackercore.instrument_sample_model` – `IdIssuer`, `Sample`, `SampleData`,
  `SampleDataParameters`, `Instrument` and `InstrumentSampleModel`, the store
  of samples and instruments that sends an `InstrumentSampleMessage` for every
  change.
- `trackercore.file_window_model` – `FileWindowModel`, the state behind a
  file chooser: directory browsing runs in worker threads, results come back
  as queued internal messages, and a `FileWindowMessage` announces the chosen
  file. `Observer` is the interface for those who watch the model.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from trackercore.events import CallbackRegisterer, EventNotifier

notifier = EventNotifier(16)
registerer = CallbackRegisterer(notifier)

received = []
owner = object()
registerer.register_listener(owner, lambda target, data: received.append(data) or True)

registerer.notify("hello")
instance = notifier.next_instance()
instance.call()
notifier.return_instance(instance)
assert received == ["hello"]
```

## What it does not do

The package holds models and helpers only. It has no window or drawing code,
no views or controllers for the file chooser or the instrument settings, no
audio playback and no reading of wave files into `Sample` objects, and no
command to run.