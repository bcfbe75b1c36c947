"""
CRUD endpoints generated per entity.

:func:`entity_urlpatterns` builds the function views for one
:class:`~clinic.services.registry.EntityDescriptor` and returns the URL
patterns mounted under ``api/<Entity>``:

* ``GET|POST api/<Entity>`` – list / create
* ``GET|PUT|DELETE api/<Entity>/<id>`` – detail / full update / physical delete
* ``PATCH api/<Entity>/update-partial`` – update a subset of fields
* ``PATCH api/<Entity>/delete-logic`` – set the active flag

Errors are raised and left to :func:`clinic.exceptions.api_exception_handler`.
"""
from __future__ import annotations

from django.urls import path
from rest_framework import status
from rest_framework.decorators import api_view
from rest_framework.response import Response

from clinic.exceptions import EntityNotFound
from clinic.serializers.common import DeleteLogicSerializer, ListQuerySerializer
from clinic.services.business import EntityService


def entity_urlpatterns(descriptor, service: EntityService | None = None) -> list:
    service = service or EntityService(descriptor)
    serializer_class = descriptor.serializer
    label = descriptor.label
    slug = descriptor.name.lower()

    @api_view(['GET', 'POST'])
    def collection(request):
        if request.method == 'GET':
            q = ListQuerySerializer(data=request.query_params)
            q.is_valid(raise_exception=True)
            page = q.validated_data.get('page') or 1
            page_size = q.validated_data.get('pageSize')
            rows, total = service.list(active=q.validated_data.get('active'), page=page, page_size=page_size)
            data = serializer_class(rows, many=True).data
            if not page_size:
                return Response(data)
            return Response({
                'ok': True,
                'data': data,
                'pagination': {'total': total, 'page': page, 'pageSize': page_size},
            })

        s = serializer_class(data=request.data)
        s.is_valid(raise_exception=True)
        obj = service.create(dict(s.validated_data))
        return Response(serializer_class(obj).data, status=status.HTTP_201_CREATED)

    @api_view(['GET', 'PUT', 'DELETE'])
    def detail(request, pk: int):
        if request.method == 'GET':
            return Response(serializer_class(service.retrieve(pk)).data)

        if request.method == 'PUT':
            s = serializer_class(data=request.data)
            s.is_valid(raise_exception=True)
            obj = service.update(pk, dict(s.validated_data))
            return Response(serializer_class(obj).data)

        service.delete(pk)
        return Response({'success': True, 'message': f'{label} deleted successfully'})

    @api_view(['PATCH'])
    def update_partial(request):
        s = descriptor.update_serializer(data=request.data, partial=True)
        s.is_valid(raise_exception=True)
        payload = dict(s.validated_data)
        if not service.update_partial(payload):
            raise EntityNotFound(label, payload.get('id'))
        return Response({'success': True, 'message': f'{label} updated successfully'})

    @api_view(['PATCH'])
    def delete_logic(request):
        s = DeleteLogicSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        payload = dict(s.validated_data)
        if not service.delete_logic(payload):
            raise EntityNotFound(label, payload.get('id'))
        verb = 'activated' if payload['status'] else 'deactivated'
        return Response({'success': True, 'message': f'{label} {verb} successfully'})

    prefix = f'api/{descriptor.name}'
    return [
        path(prefix, collection, name=f'{slug}-list'),
        path(f'{prefix}/update-partial', update_partial, name=f'{slug}-update-partial'),
        path(f'{prefix}/delete-logic', delete_logic, name=f'{slug}-delete-logic'),
        path(f'{prefix}/<int:pk>', detail, name=f'{slug}-detail'),
    ]
