"""Built-in keyword sets for direction and category classification.

All keywords are lowercase; both unaccented and accented Vietnamese spellings
are listed because notifications use either.
"""

from ..models.transaction import (
    BILLS,
    FOOD,
    INCOME,
    REFUND,
    SHOPPING,
    TRANSPORTATION,
)

# Phrases shared by direction and category passes
TOPUP_PHRASES = ("nap the", "nạp thẻ", "topup", "top up", "top-up")
OUTBOUND_TRANSFER_PHRASES = ("chuyen tien", "chuyển tiền", "chuyen den", "chuyển đến")
TRANSFER_PHRASES = ("transfer to",) + OUTBOUND_TRANSFER_PHRASES

# Direction keyword sets
VI_INCOME_KEYWORDS = (
    "dc cong", "đc cộng", "được cộng",
    "nhan", "nhận",
    "nap tien", "nạp tiền",
)
EN_INCOME_KEYWORDS = ("received", "credit", "deposit", "income", "salary")
VI_EXPENSE_KEYWORDS = (
    "da tru", "đã trừ",
    "thanh toan", "thanh toán",
    "chuyen", "chuyển",
    "mua", "mua hàng",
)
TOPUP_SUCCESS_PHRASES = ("nap thanh cong", "nạp thành công")

# Category keyword table, evaluated in this order
CATEGORY_TABLE = (
    (INCOME, ("salary", "luong", "lương")),
    (REFUND, ("refund", "hoan tra", "hoàn trả", "hoan tien", "hoàn tiền")),
    (FOOD, (
        "grabfood", "gofood", "shopeefood", "baemin",
        "highlands", "starbucks", "phuc long", "phúc long", "the coffee house",
        "kfc", "mcdonald", "lotteria", "jollibee", "pizza",
        "coffee", "cafe", "ca phe", "cà phê",
        "restaurant", "nha hang", "nhà hàng",
        "food", "an uong", "ăn uống",
    )),
    (TRANSPORTATION, (
        "grab", "gojek", "uber", "xanh sm", "taxi", "transport",
        "xang", "xăng", "petrol", "parking", "gui xe", "gửi xe",
        "vietjet", "vietnam airlines", "bamboo airways",
    )),
    (SHOPPING, (
        "shopee", "lazada", "tiki", "tokopedia", "sendo", "amazon",
        "winmart", "coopmart", "bach hoa xanh", "bách hóa xanh",
        "shopping", "mua sam", "mua sắm", "mua hang", "mua hàng",
    )),
    (BILLS, (
        "bill", "hoa don", "hóa đơn",
        "electric", "tien dien", "tiền điện", "evn",
        "tien nuoc", "tiền nước", "water",
        "internet", "wifi", "vnpt", "fpt telecom",
        "cuoc", "cước",
    )),
)
