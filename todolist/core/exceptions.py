class TodoNotFoundException(Exception):
    def __init__(self, id: "str"):
        self.id = id
        super(TodoNotFoundException, self).__init__(f"Todo with ID '{id}' not found.")


class TodoValidationException(Exception):
    def __init__(self, field: "str", message: "str"):
        self.field = field
        self.message = message
        super().__init__(f"Invalid value for field '{field}': {message}")


class TodoSerializationException(Exception):
    def __init__(self, message: "str"):
        super().__init__("Could not deserialize todo. %s" % message)
