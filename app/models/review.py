from pydantic import BaseModel, Field
from typing import Dict, List, Union


class ReportedAttribute(BaseModel):
    """리뷰 작성자 프로필에서 추출한 뷰티 속성"""
    name: str
    category: str


class Review(BaseModel):
    id: int
    user: str = Field(default="Anonymous", description="작성자 이름")
    rating: float = Field(default=0, ge=0, le=5, description="평균 별점")
    comment: str = Field(default="No comment provided", description="리뷰 본문")
    date: str = Field(..., description="작성일 (ISO 8601)")
    reported_attributes: List[ReportedAttribute] = Field(default_factory=list, description="작성자 뷰티 속성")
    star_ratings: Dict[str, float] = Field(default_factory=dict, description="세부 항목 별점")


class Product(BaseModel):
    id: Union[int, str]
    brand: str = Field(default="Unknown", description="브랜드명")
    updated_at: str = Field(..., description="최종 수정일 (ISO 8601)")
