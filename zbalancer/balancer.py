"""Frame helpers and a ROUTER/ROUTER load balancer between clients and workers."""

from __future__ import annotations

from typing import Optional, Union

import zmq

Payload = Union[bytes, str, zmq.Frame]


def z_send(socket: zmq.Socket, data: Payload, flags: int = 0) -> None:
    """Send one frame; text is encoded as UTF-8."""
    if isinstance(data, str):
        data = data.encode("utf-8")
    socket.send(data, flags)


def z_recv(socket: zmq.Socket) -> bytes:
    """Receive one frame and return its bytes."""
    return socket.recv()


def _has_more(socket: zmq.Socket) -> bool:
    return bool(socket.getsockopt(zmq.RCVMORE))


def _recv_rest(socket: zmq.Socket) -> list[bytes]:
    """Receive the remaining frames of the current multipart message."""
    frames = []
    while _has_more(socket):
        frames.append(z_recv(socket))
    return frames


def _send_frames(socket: zmq.Socket, frames: list[bytes]) -> None:
    *head, last = frames
    for frame in head:
        z_send(socket, frame, zmq.SNDMORE)
    z_send(socket, last)


class LoadBalancer:
    """Routes client requests to the most recently available worker.

    Workers announce themselves by sending any message (typically ``READY``);
    each message a worker sends makes it available again. Client requests are
    only read while at least one worker is available.
    """

    def __init__(self, context: zmq.Context) -> None:
        self._available: list[bytes] = []
        self._clients = context.socket(zmq.ROUTER)
        self._workers = context.socket(zmq.ROUTER)
        for sock in (self._clients, self._workers):
            sock.setsockopt(zmq.LINGER, 0)

    def bind(self, clients_socket_path: str, workers_socket_path: str) -> None:
        """Bind the client-facing and worker-facing sockets."""
        self._clients.bind(clients_socket_path)
        self._workers.bind(workers_socket_path)

    def poll_once(self, timeout: Optional[int] = None) -> bool:
        """Wait up to ``timeout`` ms (forever if None) and handle ready sockets.

        Returns True if any socket had a message to handle.
        """
        poller = zmq.Poller()
        poller.register(self._workers, zmq.POLLIN)
        if self._available:
            poller.register(self._clients, zmq.POLLIN)
        events = dict(poller.poll(timeout))
        if not events:
            return False

        if events.get(self._workers, 0) & zmq.POLLIN:
            if not self._handle_worker():
                return True
        if events.get(self._clients, 0) & zmq.POLLIN:
            self._handle_client()
        return True

    def _handle_worker(self) -> bool:
        """Handle one worker message; False means skip clients this round."""
        self._available.append(z_recv(self._workers))
        if not _has_more(self._workers):
            return False

        if z_recv(self._workers) != b"":
            _recv_rest(self._workers)
            return False

        frames = _recv_rest(self._workers)
        if len(frames) < 3 or frames[0] == b"READY":
            return False

        _send_frames(self._clients, frames)
        return True

    def _handle_client(self) -> None:
        # Expected: identity frame(s), an empty delimiter, then the payload.
        frames = [z_recv(self._clients), *_recv_rest(self._clients)]
        if len(frames) < 3 or frames[-2] != b"":
            return

        worker_addr = self._available.pop()
        z_send(self._workers, worker_addr, zmq.SNDMORE)
        z_send(self._workers, b"", zmq.SNDMORE)
        _send_frames(self._workers, frames)

    def run(self) -> None:
        """Serve forever, until the owning context is terminated."""
        try:
            while True:
                self.poll_once()
        except zmq.ContextTerminated:
            pass
        finally:
            self.close()

    def close(self) -> None:
        """Close both sockets."""
        self._clients.close(linger=0)
        self._workers.close(linger=0)

    def __enter__(self) -> "LoadBalancer":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()