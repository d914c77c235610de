"""游戏异常模块
定义卡牌对战中的各类异常，提供明确的错误类型和信息

出牌时的失败（无目标、满血等）通过 ExecutionResult 的 reason 返回，
不抛异常；此处的异常只用于编程错误与配置错误。
"""

from i18n import t as _t


class GameError(Exception):
    """游戏异常基类

    所有游戏相关的异常都应该继承此类，
    提供统一的异常处理接口。
    """

    def __init__(self, message: str, details: dict | None = None):
        """初始化游戏异常

        Args:
            message: 错误消息
            details: 额外的错误详情（可选）
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


# ==================== 卡牌相关异常 ====================


class CardError(GameError):
    """卡牌异常基类"""

    def __init__(self, message: str | None = None, card_name: str | None = None):
        if message is None:
            message = _t("exc.card_error")
        details = {}
        if card_name:
            details["card_name"] = card_name
        super().__init__(message, details)
        self.card_name = card_name


class InvalidCardError(CardError):
    """无效卡牌参数异常

    构造卡牌时参数不合法（如负的法力消耗）时抛出
    """

    def __init__(
        self,
        message: str | None = None,
        card_name: str | None = None,
        field: str | None = None,
        value: object = None,
    ):
        if message is None:
            message = _t("exc.invalid_card")
        super().__init__(message, card_name)
        self.field = field
        self.value = value
        if field:
            self.details["field"] = field
            self.details["value"] = value


class CardNotFoundError(CardError):
    """卡牌未找到异常

    当注册表中不存在指定名称的卡牌时抛出
    """

    def __init__(self, message: str | None = None, card_name: str | None = None):
        if message is None:
            message = _t("exc.card_not_found")
        super().__init__(message, card_name)


# ==================== 效果相关异常 ====================


class EffectError(GameError):
    """效果异常基类"""

    def __init__(self, message: str | None = None, effect_name: str | None = None):
        if message is None:
            message = _t("exc.effect_error")
        details = {}
        if effect_name:
            details["effect_name"] = effect_name
        super().__init__(message, details)
        self.effect_name = effect_name


class InvalidEffectError(EffectError):
    """无效状态效果异常

    状态效果缺少名称或持续时间为负时抛出
    """

    def __init__(
        self,
        message: str | None = None,
        effect_name: str | None = None,
        reason: str | None = None,
    ):
        if message is None:
            message = _t("exc.invalid_effect")
        super().__init__(message, effect_name)
        self.reason = reason
        if reason:
            self.details["reason"] = reason


# ==================== 配置相关异常 ====================


class ConfigurationError(GameError):
    """配置错误异常

    当 GameConfig.validate() 报告错误时抛出
    """

    def __init__(self, message: str | None = None, errors: list[str] | None = None):
        if message is None:
            message = _t("exc.configuration")
        details = {}
        if errors:
            details["errors"] = errors
        super().__init__(message, details)
        self.errors = errors or []


# ==================== 工具函数 ====================


def raise_if_negative(card_name: str, field: str, value: float) -> None:
    """卡牌参数为负时抛出 InvalidCardError

    Args:
        card_name: 卡牌名称
        field: 参数名
        value: 参数值
    """
    if value < 0:
        raise InvalidCardError(
            _t("exc.negative_value", field=field, value=value),
            card_name=card_name,
            field=field,
            value=value,
        )


def raise_if_invalid_config(errors: list[str]) -> None:
    """配置校验失败时抛出 ConfigurationError"""
    if errors:
        raise ConfigurationError(errors=errors)
