"""数据模块 - 批量加载与求值"""
