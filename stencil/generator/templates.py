"""Built-in code generation templates.

Each entry maps a template name to its output extension and body.  Bodies use
the engine's directive syntax; the contexts they expect are assembled by
:class:`stencil.generator.code_generator.CodeGenerator`.
"""

from __future__ import annotations

from stencil.engine import Engine


# ---------------------------------------------------------------------------
# Vue list page
# ---------------------------------------------------------------------------

VUE_LIST_PAGE = """\
<template>
  <div class="{{kebabCase name}}-list">
    <ui-list-view
      ref="listView"
      :model="model"
      :thead="thead"
      :tbody="tbody"
      :top-action-config="topActionConfig"
      :row-action-config="rowActionConfig"
      @action="handleAction"
    />
  </div>
</template>

<script>
import { UiListView } from 'balm-ui-pro';
{{#if hasCustomActions}}
import { {{pascalCase name}}Actions } from '../config/{{kebabCase name}}-actions';
{{/if}}

export default {
  name: '{{pascalCase name}}List',
  components: {
    UiListView
  },
  data() {
    return {
      model: '{{camelCase model}}',
      thead: [
{{#each fields}}
        {
          field: '{{name}}',
          text: '{{label}}',
          {{#if sortable}}sort: true,{{/if}}
          {{#if width}}width: {{width}},{{/if}}
        },
{{/each}}
      ],
      tbody: [
{{#each fields}}
        '{{name}}',
{{/each}}
      ],
      topActionConfig: [
        {
          type: 'primary',
          text: 'Create',
          action: 'create'
        }
      ],
      rowActionConfig: [
        {
          type: 'text',
          text: 'View',
          action: 'view'
        },
        {
          type: 'text',
          text: 'Edit',
          action: 'edit'
        },
        {
          type: 'text',
          text: 'Delete',
          action: 'delete',
          confirm: true
        }
      ]
    };
  },
  methods: {
    handleAction(action, data) {
      switch (action.action) {
        case 'create':
          this.$router.push({ name: '{{camelCase name}}-create' });
          break;
        case 'view':
          this.$router.push({
            name: '{{camelCase name}}-detail',
            params: { id: data.id }
          });
          break;
        case 'edit':
          this.$router.push({
            name: '{{camelCase name}}-edit',
            params: { id: data.id }
          });
          break;
        case 'delete':
          this.handleDelete(data);
          break;
        default:
          {{#if hasCustomActions}}
          {{pascalCase name}}Actions.handleAction(action, data, this);
          {{/if}}
          {{#if noCustomActions}}
          console.warn('Unknown action:', action);
          {{/if}}
      }
    },
    async handleDelete(data) {
      try {
        await this.$api.{{camelCase model}}.delete(data.id);
        this.$toast('Deleted');
        this.$refs.listView.refresh();
      } catch (error) {
        this.$toast('Delete failed: ' + error.message);
      }
    }
  }
};
</script>

<style lang="scss" scoped>
.{{kebabCase name}}-list {
  padding: 20px;
}
</style>
"""


# ---------------------------------------------------------------------------
# Vue detail page
# ---------------------------------------------------------------------------

VUE_DETAIL_PAGE = """\
<template>
  <div class="{{kebabCase name}}-detail">
    <ui-detail-view
      :model="model"
      :model-path="modelPath"
      :config="config"
      :readonly="readonly"
      @save="handleSave"
      @cancel="handleCancel"
    />
  </div>
</template>

<script>
import { UiDetailView } from 'balm-ui-pro';
{{#if hasModelConfig}}
import { {{camelCase model}}Config } from '../../model-config/{{kebabCase model}}';
{{/if}}

export default {
  name: '{{pascalCase name}}Detail',
  components: {
    UiDetailView
  },
  props: {
    readonly: {
      type: Boolean,
      default: false
    }
  },
  data() {
    return {
      model: '{{camelCase model}}',
      modelPath: this.$route.params.id ? `{{camelCase model}}/${this.$route.params.id}` : '{{camelCase model}}',
      config: {{#if hasModelConfig}}{{camelCase model}}Config{{/if}}{{#if inlineConfig}}{
        fields: [
{{#each fields}}
          {
            field: '{{name}}',
            label: '{{label}}',
            component: '{{component}}',
            {{#if required}}required: true,{{/if}}
            {{#if validation}}validation: '{{validation}}',{{/if}}
            {{#if options}}options: {{json options}},{{/if}}
          },
{{/each}}
        ]
      }{{/if}}
    };
  },
  computed: {
    isEdit() {
      return !!this.$route.params.id;
    }
  },
  methods: {
    async handleSave(data) {
      try {
        if (this.isEdit) {
          await this.$api.{{camelCase model}}.update(this.$route.params.id, data);
          this.$toast('Updated');
        } else {
          await this.$api.{{camelCase model}}.create(data);
          this.$toast('Created');
        }
        this.$router.push({ name: '{{camelCase name}}-list' });
      } catch (error) {
        this.$toast('Save failed: ' + error.message);
      }
    },
    handleCancel() {
      this.$router.push({ name: '{{camelCase name}}-list' });
    }
  }
};
</script>

<style lang="scss" scoped>
.{{kebabCase name}}-detail {
  padding: 20px;
}
</style>
"""


# ---------------------------------------------------------------------------
# API, routes, mock data, model config
# ---------------------------------------------------------------------------

API_CONFIG = """\
/**
 * {{pascalCase name}} API Configuration
 * Generated by stencil
 */

export const {{camelCase name}} = [
  '{{camelCase model}}',
  '{{endpoint}}'{{#if operations}},
  {{json operations}}{{/if}}{{#if customActionsConfig}},
  {{customActionsConfig}}{{/if}}
];

export default [{{camelCase name}}];
"""

_ROUTE_META = """\
    {{#if requiresAuth}}
    meta: {
      requiresAuth: true,
      {{#if permissions}}
      permissions: {{json permissions}},
      {{/if}}
      title: '%s'
    }
    {{/if}}
"""

ROUTE_CONFIG = (
    """\
/**
 * {{pascalCase name}} Routes Configuration
 * Generated by stencil
 */

export const {{camelCase name}}Routes = [
  {
    path: '/{{kebabCase name}}',
    name: '{{camelCase name}}-list',
    component: () => import('../pages/{{kebabCase name}}/{{kebabCase name}}-list.vue'),
"""
    + _ROUTE_META % "{{title}} List"
    + """\
  },
  {
    path: '/{{kebabCase name}}/create',
    name: '{{camelCase name}}-create',
    component: () => import('../pages/{{kebabCase name}}/{{kebabCase name}}-detail.vue'),
"""
    + _ROUTE_META % "Create {{title}}"
    + """\
  },
  {
    path: '/{{kebabCase name}}/:id',
    name: '{{camelCase name}}-detail',
    component: () => import('../pages/{{kebabCase name}}/{{kebabCase name}}-detail.vue'),
    props: { readonly: true },
"""
    + _ROUTE_META % "{{title}} Detail"
    + """\
  },
  {
    path: '/{{kebabCase name}}/:id/edit',
    name: '{{camelCase name}}-edit',
    component: () => import('../pages/{{kebabCase name}}/{{kebabCase name}}-detail.vue'),
"""
    + _ROUTE_META % "Edit {{title}}"
    + """\
  }
];

export default {{camelCase name}}Routes;
"""
)

MOCK_DATA = """\
import { responseHandler, errorHandler } from '@mock-server/handler';

/**
 * {{pascalCase name}} Mock Data
 * Generated by stencil
 */

function generate{{pascalCase name}}Data(count = 10) {
  const data = [];
  for (let i = 1; i <= count; i++) {
    data.push({
      id: i,
{{#each fields}}
      {{name}}: {{mockValue type @index}},
{{/each}}
      createdAt: new Date(Date.now() - Math.random() * 30 * 24 * 60 * 60 * 1000).toISOString(),
      updatedAt: new Date().toISOString()
    });
  }
  return data;
}

const {{camelCase name}}Data = generate{{pascalCase name}}Data();

export function get{{pascalCase name}}Apis(server) {
  // POST {{endpoint}}/index - List with pagination
  server.post('{{endpoint}}/index', (schema, request) => {
    const requestData = JSON.parse(request.requestBody);
    const { page = 1, pageSize = 10, ...filters } = requestData;

    let filteredData = {{camelCase name}}Data;

    Object.keys(filters).forEach(key => {
      if (filters[key]) {
        filteredData = filteredData.filter(item =>
          String(item[key]).toLowerCase().includes(String(filters[key]).toLowerCase())
        );
      }
    });

    const start = (page - 1) * pageSize;
    const end = start + parseInt(pageSize);

    return responseHandler({
      list: filteredData.slice(start, end),
      total: filteredData.length
    });
  });

  // POST {{endpoint}}/info - Get single item
  server.post('{{endpoint}}/info', (schema, request) => {
    const data = JSON.parse(request.requestBody);
    const item = {{camelCase name}}Data.find(item => item.id == data.id);

    return item ? responseHandler(item) : errorHandler('{{title}} not found');
  });

  // POST {{endpoint}}/add - Create new item
  server.post('{{endpoint}}/add', (schema, request) => {
    const data = JSON.parse(request.requestBody);
    const newItem = {
      id: Math.max(0, ...{{camelCase name}}Data.map(item => item.id)) + 1,
      ...data,
      createdAt: new Date().toISOString(),
      updatedAt: new Date().toISOString()
    };

    {{camelCase name}}Data.push(newItem);

    return responseHandler(newItem);
  });

  // POST {{endpoint}}/edit - Update item
  server.post('{{endpoint}}/edit', (schema, request) => {
    const data = JSON.parse(request.requestBody);
    const index = {{camelCase name}}Data.findIndex(item => item.id == data.id);

    if (index === -1) {
      return errorHandler('{{title}} not found');
    }
    {{camelCase name}}Data[index] = {
      ...{{camelCase name}}Data[index],
      ...data,
      updatedAt: new Date().toISOString()
    };
    return responseHandler({{camelCase name}}Data[index]);
  });

  // POST {{endpoint}}/delete - Delete item
  server.post('{{endpoint}}/delete', (schema, request) => {
    const data = JSON.parse(request.requestBody);
    const index = {{camelCase name}}Data.findIndex(item => item.id == data.id);

    if (index === -1) {
      return errorHandler('{{title}} not found');
    }
    {{camelCase name}}Data.splice(index, 1);
    return responseHandler();
  });
{{#if customMethods}}
{{#each customMethods}}

  // POST {{endpoint}}/{{@key}} - {{description}}
  server.post('{{endpoint}}/{{@key}}', (schema, request) => {
    const data = JSON.parse(request.requestBody);
    return responseHandler(data);
  });
{{/each}}
{{/if}}
}
"""

MODEL_CONFIG = """\
/**
 * {{pascalCase name}} Model Configuration
 * Generated by stencil
 */

export const {{camelCase name}}Config = {
  fields: [
{{#each fields}}
    {
      field: '{{name}}',
      label: '{{label}}',
      component: '{{component}}',
      {{#if required}}required: true,{{/if}}
      {{#if validation}}validation: '{{validation}}',{{/if}}
      {{#if placeholder}}placeholder: '{{placeholder}}',{{/if}}
      {{#if options}}options: {{json options}},{{/if}}
      {{#if props}}props: {{json props}},{{/if}}
    },
{{/each}}
  ],
  {{#if validationRules}}
  validationRules: {{json validationRules}},
  {{/if}}
  {{#if formLayout}}
  layout: '{{formLayout}}',
  {{/if}}
  {{#if submitText}}
  submitText: '{{submitText}}',
  {{/if}}
  {{#if cancelText}}
  cancelText: '{{cancelText}}',
  {{/if}}
};

export default {{camelCase name}}Config;
"""


BUILTIN_TEMPLATES: dict[str, tuple[str, str]] = {
    "vue-list-page": (".vue", VUE_LIST_PAGE),
    "vue-detail-page": (".vue", VUE_DETAIL_PAGE),
    "api-config": (".js", API_CONFIG),
    "route-config": (".js", ROUTE_CONFIG),
    "mock-data": (".js", MOCK_DATA),
    "model-config": (".js", MODEL_CONFIG),
}

REQUIRED_FIELDS: dict[str, list[str]] = {
    "vue-list-page": ["name", "model", "fields"],
    "vue-detail-page": ["name", "model", "fields"],
    "api-config": ["name", "model", "endpoint"],
    "route-config": ["name", "title"],
    "mock-data": ["name", "endpoint"],
    "model-config": ["name", "fields"],
}


def register_builtin_templates(engine: Engine, *, replace: bool = True) -> list[str]:
    """Register :data:`BUILTIN_TEMPLATES` entries on *engine*.

    With ``replace=False`` names the engine already holds are left alone.

    Returns:
        Names of the templates registered.
    """
    registered: list[str] = []
    for name, (extension, body) in BUILTIN_TEMPLATES.items():
        if not replace and name in engine.templates:
            continue
        engine.register_template(name, body, extension)
        registered.append(name)
    return registered
