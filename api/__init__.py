"""
API 層

FastAPI routers：只負責參數解析與錯誤碼對應，業務邏輯在 core.player_manager
"""
