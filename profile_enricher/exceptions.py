class ProfileEnricherException(Exception): ...


class MissingInputException(ProfileEnricherException):
    def __init__(self, attribute_name: str) -> None:
        super().__init__(f"Could not resolve {attribute_name} value")
        self.attribute_name = attribute_name
