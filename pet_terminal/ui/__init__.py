"""终端文本渲染。"""
