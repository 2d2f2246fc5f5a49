# dgengine

Core building blocks of a small game engine, in plain Python with no
third-party dependencies.

## What is in it

- `dgengine.messages` – engine message dataclasses (`Quit`, `WindowResized`,
  `InputKey`, `InputMouse`, `InputText`, `GUIPointerMove` and others), each with
  a `category` (`MessageCategory`) and a `handled` flag, and the abstract
  `EventPoller` whose iteration yields pending messages until `next_event()`
  returns `None`.
- `dgengine.system` – `MessageHandler`, which dispatches a message to a method
  named after its class (`handle_window_resized` for `WindowResized`), the
  `System` base class with a per-class `system_id()`, and `ConsoleSystem`,
  which logs every message except pointer movement at debug level.
- `dgengine.system_stack` – `SystemStack`, systems in push order, at most one
  per id; pushing attaches a system, popping detaches it.
- `dgengine.system_input` – `InputSystem`, which drains an `EventPoller`: raw
  input messages run the callback bound to their `(code, event)` pair, and
  non-input messages are passed to the `post` callable you supply.
- `dgengine.shader_utils` – GLSL data types and their class, base type,
  component count, byte size and OpenGL enumerant; shader domains and the
  `ShaderDomains` set.
- `dgengine.shader_source` – `remove_comments` and `ShaderSource`, one
  comment-free source text per domain.
- `dgengine.shader_uniform` – `ShaderData`, which extracts `uniform`
  declarations (flattening structs into `name.field` entries), merges those
  shared between domains and lays them out in a uniform buffer; plus
  `UniformBufferElementHeader` (24-bit size, 8 flag bits).
- `dgengine.texture_data` – `TextureAttributes` packed into 32 bits and
  `TextureData` with byte serialization.
- `dgengine.resource_manager` – `ResourceManager`, a shared registry of
  resources by id, and `next_resource_id()`.
- `dgengine.serialize` – packing of fixed-size values and null-terminated
  strings into bytes.
- `dgengine.unicode` – `UTF8Parser` and `decode_utf8`, a streaming UTF-8
  decoder that ends with `INVALID_CHAR` on malformed input.
- `dgengine.utils` – `Colour` (RGBA in 32 bits), `UIAABB` and
  `import_text_file`.
- `dgengine.interfaces` – abstract `Window`, `GraphicsContext`,
  `MouseController` and `FileSystem`, plus `LocalFileSystem`.
- `dgengine.entrypoint` – `run_application`, which records start-up or run
  failures in a crash report file instead of raising.
- `dgengine.options` – engine constants and `LogLevel`.

## Installation

```
pip install .
```

## Examples

Parse the uniforms of a shader:

```python
from dgengine.shader_source import ShaderSourceElement
from dgengine.shader_uniform import ShaderData
from dgengine.shader_utils import ShaderDomain

data = ShaderData([
    ShaderSourceElement(ShaderDomain.VERTEX, "uniform mat4 u_mvp; // model-view-projection"),
    ShaderSourceElement(ShaderDomain.FRAGMENT, "uniform vec4 u_colour;"),
])
print(data.find_uniform("u_colour"))
print(data.find_uniform_index("u_mvp"))   # 0
print(data.uniform_data_size)             # 68 + 20 = 88
```

Decode UTF-8 into code points:

```python
from dgengine.unicode import decode_utf8

print(decode_utf8("héllo".encode()))
```

Run an application so that any failure is written to a crash report:

```python
from dgengine.entrypoint import run_application

run_application(create_application, "crash-report.txt")
```

Here `create_application` is a function of yours that returns an object with a
`run()` method.

## What it does not do

The package has no window, graphics, mouse or event backend: `Window`,
`GraphicsContext`, `MouseController` and `EventPoller` are abstract, and you
supply the implementations. It does not render anything, has no GUI widgets,
and has no message bus – `InputSystem` forwards messages only through the
`post` callable it is given. It installs no command.

## Running the tests

```
pip install .[test]
pytest
```