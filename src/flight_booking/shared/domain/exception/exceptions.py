class DomainException(Exception):
    """ドメイン層で発生する基底例外"""

    pass


class ResourceNotFoundException(DomainException):
    """リソースが見つからない場合"""

    pass


class BusinessRuleViolationException(DomainException):
    """ビジネスルールに違反した場合"""

    pass


class SessionNotFoundException(ResourceNotFoundException):
    """セッションが存在しない、または有効期限切れの場合"""

    pass


class SessionNotInitializedException(BusinessRuleViolationException):
    """セッションID の採番前にセッション操作が呼ばれた場合（呼び出し順序の誤り）"""

    pass


class SessionPersistenceException(DomainException):
    """セッションの保存に失敗した場合（呼び出し側でリトライを促す）"""

    pass
