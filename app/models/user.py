from pydantic import BaseModel, Field
from typing import List, Optional, Union, Literal


class BeautySubtag(BaseModel):
    name: str


class BeautyCategory(BaseModel):
    name: str
    subtags: List[BeautySubtag] = Field(default_factory=list)


class BeautyProfile(BaseModel):
    """사용자가 직접 입력한 뷰티 속성 (카테고리 > 서브태그)"""
    categories: List[BeautyCategory] = Field(default_factory=list)

    def flatten(self) -> List[str]:
        """카테고리 순서, 서브태그 순서대로 소문자 속성명 나열 (중복 유지)"""
        return [
            subtag.name.lower()
            for category in self.categories
            for subtag in category.subtags
        ]

    def original_name(self, key: str) -> Optional[str]:
        """소문자 키와 일치하는 첫 번째 서브태그의 원래 표기"""
        for category in self.categories:
            for subtag in category.subtags:
                if subtag.name.lower() == key:
                    return subtag.name
        return None

    def is_empty(self) -> bool:
        return not self.flatten()


# 외부 API 뷰티 데이터는 버전에 따라 두 가지 형태로 내려온다
class SkinTypesBeautyData(BaseModel):
    """구버전 형태: user.skin_types[] / user.hair_types[]"""
    kind: Literal["skin_types"] = "skin_types"
    skin_types: List[BeautySubtag] = Field(default_factory=list)
    hair_types: List[BeautySubtag] = Field(default_factory=list)


class CategorizedBeautyData(BaseModel):
    """신버전 형태: user.beauty[].subtags[]"""
    kind: Literal["beauty"] = "beauty"
    beauty: List[BeautyCategory] = Field(default_factory=list)


class EmptyBeautyData(BaseModel):
    kind: Literal["empty"] = "empty"


BeautyData = Union[SkinTypesBeautyData, CategorizedBeautyData, EmptyBeautyData]
