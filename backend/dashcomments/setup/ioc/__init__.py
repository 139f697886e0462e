from dashcomments.setup.ioc.container import AppProvider, create_container

__all__ = ["AppProvider", "create_container"]
