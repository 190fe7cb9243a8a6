class TickError(Exception):
    pass


class ValidationError(TickError):
    pass


class StoreError(TickError):
    pass


class IndexOutOfRangeError(TickError):
    def __init__(self, index: int, count: int):
        self.index = index
        self.count = count
        noun = "task" if count == 1 else "tasks"
        super().__init__(f"task {index} does not exist (list has {count} {noun})")
