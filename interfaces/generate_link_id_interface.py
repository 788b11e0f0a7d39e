from abc import ABC, abstractmethod

class IGenerateLinkId(ABC):

    @abstractmethod
    def generate(self) -> str:
        raise NotImplementedError("Method Generate Of Interface IGenerateLinkId Is Not Implemented")
