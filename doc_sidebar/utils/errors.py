from typing import Iterable

class DocSidebarError(Exception): ...
class ValidationError(DocSidebarError): ...
class ConfigNotFoundError(DocSidebarError): ...
class PublishError(DocSidebarError): ...

class MissingFieldError(ValidationError):
    def __init__(self, fields: Iterable[str]):
        self.fields = tuple(fields)
        super().__init__(f"Missing sidebar field(s): {', '.join(self.fields)}")
