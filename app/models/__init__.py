from .user import (
    BeautyProfile,
    BeautyCategory,
    BeautySubtag,
    BeautyData,
    SkinTypesBeautyData,
    CategorizedBeautyData,
    EmptyBeautyData
)
from .review import Review, ReportedAttribute, Product
from .matching import (
    MatchingRequest,
    MatchResult,
    RatingsMatchResult,
    SignificantAttribute
)

__all__ = [
    # User models
    "BeautyProfile",
    "BeautyCategory",
    "BeautySubtag",
    "BeautyData",
    "SkinTypesBeautyData",
    "CategorizedBeautyData",
    "EmptyBeautyData",
    # Review models
    "Review",
    "ReportedAttribute",
    "Product",
    # Matching models
    "MatchingRequest",
    "MatchResult",
    "RatingsMatchResult",
    "SignificantAttribute"
]
