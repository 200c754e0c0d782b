from enum import StrEnum, auto


class FitzpatrickSkinType(StrEnum):
    type_i = auto()
    type_ii = auto()
    type_iii = auto()
    type_iv = auto()
    type_v = auto()
    type_vi = auto()

    @property
    def phototype_index(self) -> int:
        """Zero-based phototype used to index the dose threshold table"""
        return list(FitzpatrickSkinType).index(self)

    @classmethod
    def all_skin_types(cls):
        return [x for x in cls]
