from jujuhook import Status, StatusType, Transport, config_get_all, log, open_port, status_set


def config_changed():
    for key, value in sorted(config_get_all().items()):
        log(f"config {key}={value}")


def start():
    open_port(80, Transport.TCP)
    status_set(Status(StatusType.ACTIVE, "serving"))
