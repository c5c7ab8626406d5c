"""
Schedulers

Run delayed continuations for the engine (settle and reveal delays).
"""

import threading
from typing import Callable


class ScheduledCall:
    """Handle for a pending continuation."""
    
    def __init__(self, callback: Callable[[], None]):
        self.callback = callback
        self.cancelled = False
        self.done = False
    
    @property
    def active(self) -> bool:
        return not (self.cancelled or self.done)
    
    def cancel(self) -> None:
        self.cancelled = True
    
    def run(self) -> None:
        if self.active:
            self.done = True
            self.callback()


class ThreadingScheduler:
    """Runs continuations on daemon timer threads."""
    
    def call_later(self, delay: float, callback: Callable[[], None]) -> ScheduledCall:
        call = ScheduledCall(callback)
        timer = threading.Timer(delay, call.run)
        timer.daemon = True
        timer.start()
        return call


class SocketIOScheduler:
    """Runs continuations as Socket.IO background tasks so emits work from them."""
    
    def __init__(self, socketio):
        self.socketio = socketio
    
    def call_later(self, delay: float, callback: Callable[[], None]) -> ScheduledCall:
        call = ScheduledCall(callback)
        
        def _task():
            self.socketio.sleep(delay)
            call.run()
        
        self.socketio.start_background_task(_task)
        return call
