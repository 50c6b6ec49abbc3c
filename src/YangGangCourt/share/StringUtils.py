from typing import List, Tuple

import regex as re


class StringUtils:
    """
    提供字符串处理相关的静态工具方法
    """

    @staticmethod
    def strip_whitespace(text: str) -> str:
        """
        移除所有空白字符，包括全角空格。<br>
        例如：'白爛 + 1' -> '白爛+1'
        """
        return re.sub(r"\s", "", text)

    @staticmethod
    def normalize_username(username: str) -> str:
        """
        统一用户名格式，确保以 '@' 开头。<br>
        例如：'amao62626' -> '@amao62626'
        """
        username = username.strip()
        return username if username.startswith("@") else f"@{username}"

    @staticmethod
    def split_command(text: str) -> Tuple[str, List[str]]:
        """
        将命令消息拆分为命令本身和参数列表。<br>
        例如：'!vote @amao62626' -> ('!vote', ['@amao62626'])
        """
        parts = text.split()
        if not parts:
            return "", []
        return parts[0], parts[1:]
