from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional, Union, Literal


class MatchingRequest(BaseModel):
    """매칭률 계산 요청

    beauty_profile 과 user_id 가 모두 없으면 별점 기반 fallback 으로 계산한다.
    beauty_profile 은 beauty[] / categories[] / skin_types[] 어느 형태든 받고,
    잘못된 항목은 어댑터에서 건너뛴다.
    """
    product_id: Union[int, str] = Field(..., description="상품 ID")
    beauty_profile: Optional[Any] = Field(default=None, description="사용자 뷰티 프로필 (직접 전달, 외부 API 와 같은 형태)")
    user_id: Optional[Union[int, str]] = Field(default=None, description="외부 API에서 프로필을 조회할 사용자 ID")

    @property
    def has_profile_source(self) -> bool:
        return self.beauty_profile is not None or self.user_id is not None


class SignificantAttribute(BaseModel):
    name: str
    frequency: int


class MatchResult(BaseModel):
    """뷰티 속성 기반 매칭 결과"""
    mode: Literal["attributes"] = "attributes"
    matching_percentage: int = Field(default=0, ge=0, le=100, description="최종 매칭률")
    attribute_percentages: Dict[str, int] = Field(default_factory=dict, description="속성별 기여도")
    attribute_frequencies: Dict[str, int] = Field(default_factory=dict, description="고평점 리뷰 속성 빈도")
    significant_attributes: List[SignificantAttribute] = Field(default_factory=list, description="빈도 2 이상 속성")
    user_attributes: List[str] = Field(default_factory=list, description="사용자 속성 (소문자)")
    simple_percentage: int = Field(default=0, description="단순 일치율")
    weighted_percentage: int = Field(default=0, description="빈도 가중 일치율")
    message: Optional[str] = None


class RatingsMatchResult(BaseModel):
    """프로필이 없을 때 별점만으로 계산한 매칭 결과"""
    mode: Literal["ratings"] = "ratings"
    matching_percentage: int = Field(default=0, ge=0, le=100, description="최종 매칭률")
    rating_percentages: Dict[str, int] = Field(default_factory=dict, description="항목별 별점 환산값")
    review_count: int = 0
    message: Optional[str] = None
