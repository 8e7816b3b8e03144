class ServiceNotFoundException(Exception):
    def __init__(self, cluster: str, service: str):
        super().__init__(f'Service {service} not found in cluster {cluster}')
        self.cluster = cluster
        self.service = service
