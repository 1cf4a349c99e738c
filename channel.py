class Channel(object):
    """
    A minimal publish/subscribe mechanism, e.g. to let others know about changes of the selected block.

    >>> from channel import Channel
    >>> c = Channel()
    >>> def r0(data):
    ...     print("R0 RECEIVED", data)
    ...
    >>> def r1(data):
    ...     print("R1 RECEIVED", data)
    ...
    >>> disconnect0 = c.connect(r0)
    >>> disconnect1 = c.connect(r1)
    >>> c.broadcast("block 3")
    R0 RECEIVED block 3
    R1 RECEIVED block 3
    >>> disconnect0()
    >>> c.broadcast("block 4")
    R1 RECEIVED block 4

    Disconnecting twice is harmless:
    >>> disconnect0()
    >>> len(c.receivers)
    1
    """

    def __init__(self):
        self.receivers = []

    def connect(self, receiver):
        # receiver :: function that takes data; returns an argless function to disconnect with
        self.receivers.append(receiver)

        def disconnect():
            if receiver in self.receivers:
                self.receivers.remove(receiver)

        return disconnect

    def broadcast(self, data):
        # iterate over a copy: receivers may disconnect while receiving
        for r in self.receivers[:]:
            r(data)
