class AsyncStreamError(Exception):
    pass


class EmitProtocolError(AsyncStreamError):
    pass


class StreamBusyError(AsyncStreamError):
    pass


class SlotEmpty(AsyncStreamError):
    pass
