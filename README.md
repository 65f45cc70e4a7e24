# zbalancer

A small ZeroMQ broker that spreads client requests over a pool of workers.

`zbalancer.balancer.LoadBalancer` owns two `ROUTER` sockets. Clients connect to
one and workers connect to the other. Each message a worker sends makes that
worker available. Client requests are read only while at least one worker is
available. The next request goes to the worker that became available most
recently.

## Installation

```
pip install zbalancer
```

## Message framing

A **client** (for example a `REQ` socket) sends a request. The broker receives it as:

- one or more identity frames,
- an empty frame,
- the payload frame.

If a request has fewer than three frames, or its next-to-last frame is not empty,
the broker drops it. Otherwise the broker sends the worker's identity, an empty
frame and then every frame of the request to the chosen worker. A `REQ` worker
therefore receives `[client identity, "", payload]`.

A **worker** (for example a `REQ` socket) reaches the broker as:

- its identity frame,
- an empty frame,
- the reply frames.

The broker marks the worker as available as soon as it reads the identity
frame, whatever follows. The rest of the message is then handled like this:

- If the second frame is not empty, the remaining frames are discarded.
- If there are fewer than three reply frames, or the first reply frame is
  `READY`, nothing is sent on. A worker can register with `["READY", "", ""]`.
- Otherwise the reply frames go out on the client socket. For example,
  `[client identity, "", payload]` goes back to that client.

A worker that is recorded as available more than once can receive more than one
request. When a worker message is not passed on, the broker does not read client
requests in that polling round.

## Usage

```python
import zmq
from zbalancer.balancer import LoadBalancer

context = zmq.Context()
with LoadBalancer(context) as balancer:
    balancer.bind("tcp://*:5555", "tcp://*:5556")
    balancer.run()
```

The first argument of `bind` is the client-side endpoint and the second is the
worker-side endpoint. `run` polls until the context is terminated. It returns
quietly on `zmq.ContextTerminated`. It always closes both sockets when it stops.

To run the broker inside your own loop, call `poll_once(timeout)` instead. It
waits up to `timeout` milliseconds for incoming messages, or without limit if
the timeout is `None` or negative. It handles whatever is ready and returns
`True` if any socket had a message, or `False` on timeout:

```python
while keep_going():
    balancer.poll_once(100)
```

`close()` closes both sockets with zero linger. Leaving the `with` block does
the same.

The helpers `z_send(socket, data, flags=0)` and `z_recv(socket)` send and
receive a single frame. `z_send` accepts `str` (encoded as UTF-8), `bytes` or a
`zmq.Frame`. `z_recv` returns `bytes`.

## What it does not do

The package is a library only and has no command-line program. It provides no
client or worker implementation. It has no heartbeating and no detection of
workers that have gone away. It does not queue client requests beyond what
ZeroMQ buffers itself.