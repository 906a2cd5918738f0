"""
核心業務邏輯層

這個 package 包含所有核心業務邏輯，包括：
- PlayerManager：管理 Player 的生命週期（列表、建立、更新、刪除）
- PlayerStore：Manager 唯一的儲存介面
- Exceptions：業務異常，由 API 層轉成 HTTP 狀態碼
"""
