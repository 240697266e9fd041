"""
Default menu for the venue (prices in VND)
"""
from models.menu import MenuItem, MenuCategory

HOUSE_IMAGE = "https://i.ibb.co/RGJTs33k/JSC-ERM.png"

DEFAULT_MENU_ITEMS = (
    MenuItem("food-1", "Đồ ăn siu cấp JSC 1", 50000, MenuCategory.FOOD, HOUSE_IMAGE),
    MenuItem("food-2", "Đồ ăn siu cấp JSC 2", 65000, MenuCategory.FOOD, HOUSE_IMAGE),
    MenuItem("food-3", "Đồ ăn siu cấp JSC 3", 60000, MenuCategory.FOOD, HOUSE_IMAGE),
    MenuItem("food-4", "Lẩu thái", 250000, MenuCategory.FOOD, HOUSE_IMAGE),
    MenuItem("drink-1", "Signature", 20000, MenuCategory.DRINK),
    MenuItem("drink-2", "Trà Đào", 25000, MenuCategory.DRINK),
    MenuItem("drink-3", "Trà Matcha", 30000, MenuCategory.DRINK),
    MenuItem("drink-4", "Chanh Dây", 18000, MenuCategory.DRINK),
    MenuItem("drink-5", "Soda Việt Quất", 22000, MenuCategory.DRINK),
    MenuItem("service-1", "Phí phục vụ bàn", 10000, MenuCategory.SERVICE),
    MenuItem("service-2", "Khăn lạnh", 2000, MenuCategory.SERVICE),
)
