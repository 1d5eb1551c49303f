"""Errors raised by the conversion engine."""


class AnimalAgeError(Exception):
    """Base class for all animal-age errors."""


class UnknownAnimal(AnimalAgeError):
    """Raised when an animal key is not in the registry.

    ``suggestions`` holds ranked close matches when the caller has them;
    they are listed in the message.
    """

    def __init__(self, raw_key: str, suggestions: tuple = ()) -> None:
        message = f"Unknown animal type: {raw_key}."
        if suggestions:
            quoted = ", ".join(f"'{s.candidate_key}'" for s in suggestions)
            message += f" Did you mean {quoted}?"
        super().__init__(message + "\nUse --list to view valid options.")
        self.raw_key = raw_key
        self.suggestions = tuple(suggestions)


class InvalidAge(AnimalAgeError):
    """Raised for a negative or non-finite age, or one too large to convert.

    Fatal for the whole batch.
    """

    def __init__(self, value: float) -> None:
        super().__init__(f"Invalid age: {value} (age must be a finite, non-negative number of years)")
        self.value = value


class EmptyAnimalList(AnimalAgeError):
    """Raised when a batch contains no animal keys."""

    def __init__(self) -> None:
        super().__init__("No animal types given")
