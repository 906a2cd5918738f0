"""
服務層

這個 package 包含純計算邏輯，不碰資料庫、不拋 HTTP 錯誤：
- validation_service：欄位驗證
- level_service：等級與升級所需經驗計算
- filter_service：多條件過濾
- sort_service：排序
- pagination_service：分頁
- date_service：epoch milliseconds 與日期互轉
"""
