import string

from nanoid import generate

from interfaces.generate_link_id_interface import IGenerateLinkId
from models.link import LINK_ID_LENGTH

LINK_ID_ALPHABET = "_-" + string.digits + string.ascii_lowercase + string.ascii_uppercase


class NanoidLinkIdGenerator(IGenerateLinkId):

    def __init__(self, size: int = LINK_ID_LENGTH, alphabet: str = LINK_ID_ALPHABET):
        self.size = size
        self.alphabet = alphabet

    def generate(self) -> str:
        return generate(self.alphabet, self.size)
